"""Integration tests for application wiring."""
import logging

import pytest

from pattern_gallery.application.dto import (
    CompareExampleCommand,
    ListPatternsQuery,
    RunAllExamplesCommand,
    RunExampleCommand,
)
from pattern_gallery.bootstrap import Application
from pattern_gallery.config import DemoConfig
from pattern_gallery.config.loader import ConfigurationLoader
from pattern_gallery.config.manager import ConfigurationManager
from pattern_gallery.domain.base.ports import EventPublisherPort
from pattern_gallery.domain.catalog import PatternName, Variant
from pattern_gallery.infrastructure.di.container import DIContainer
from pattern_gallery.infrastructure.registry.example_catalog import (
    ExampleCatalog,
    get_example_catalog,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def app():
    loader = ConfigurationLoader(environ={
        "PATTERN_GALLERY_LOGGING__DESTINATION": "none",
        "PATTERN_GALLERY_DEMO__SEED": "7",
    })
    config_manager = ConfigurationManager(loader=loader)
    return Application(config_manager=config_manager, container=DIContainer()).initialize()


class TestApplication:
    """Test the container-backed application context."""

    def test_initialize_is_idempotent(self, app):
        assert app.initialize() is app

    def test_configuration_is_registered(self, app):
        assert app.container.get(DemoConfig).seed == 7

    def test_catalog_is_shared_with_registry(self, app):
        assert app.container.get(ExampleCatalog) is get_example_catalog()

    def test_event_publisher_is_a_singleton(self, app):
        assert app.container.get(EventPublisherPort) is app.container.get(EventPublisherPort)

    def test_query_bus_lists_patterns(self, app):
        patterns = app.get_query_bus().execute(ListPatternsQuery())

        assert len(patterns) == len(PatternName)

    def test_command_bus_runs_default_variant(self, app):
        result = app.get_command_bus().execute(RunExampleCommand(pattern=PatternName.BUILDER, slug="pizza"))

        assert result.success is True
        assert result.variant == Variant.REFACTORED.value

    def test_compare(self, app):
        comparison = app.get_command_bus().execute(
            CompareExampleCommand(pattern=PatternName.PROXY, slug="lazy-image"))

        assert comparison.basic.success and comparison.refactored.success
        assert comparison.basic.lines != comparison.refactored.lines

    def test_run_all_for_one_pattern(self, app):
        summary = app.get_command_bus().execute(RunAllExamplesCommand(pattern=PatternName.SINGLETON))

        assert summary.success is True
        assert summary.total == 8
        assert summary.failed == 0
