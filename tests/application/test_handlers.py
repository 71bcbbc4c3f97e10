"""Tests for the catalog query handlers and run command handlers."""
from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.application.commands.handlers import (
    CompareExampleHandler,
    RunAllExamplesHandler,
    RunExampleHandler,
)
from pattern_gallery.application.dto import (
    CompareExampleCommand,
    GetExampleQuery,
    ListExamplesQuery,
    ListPatternsQuery,
    RunAllExamplesCommand,
    RunExampleCommand,
)
from pattern_gallery.application.queries.handlers import (
    GetExampleHandler,
    ListExamplesHandler,
    ListPatternsHandler,
)
from pattern_gallery.config.schemas import DemoConfig
from pattern_gallery.domain.catalog import ExampleNotFoundError, PatternName, RunResult, Variant


class TestQueryHandlers:
    """Test catalog browsing."""

    def test_list_patterns_covers_every_pattern(self, catalog):
        patterns = ListPatternsHandler(catalog).handle(ListPatternsQuery())

        assert [p.name for p in patterns] == [pattern.value for pattern in PatternName]
        observer = next(p for p in patterns if p.name == "observer")
        assert observer.category == "behavioral"
        assert observer.example_count == 4
        assert "weather-station" in observer.examples

    def test_list_examples_filtered_by_pattern(self, catalog):
        examples = ListExamplesHandler(catalog).handle(ListExamplesQuery(pattern=PatternName.COMMAND))

        assert [e.slug for e in examples] == [
            "calculator", "drawing-app", "order-manager", "remote-control", "stock-trading",
        ]
        assert all(e.pattern == "command" for e in examples)

    def test_get_example(self, catalog):
        example = GetExampleHandler(catalog).handle(
            GetExampleQuery(pattern=PatternName.PROXY, slug="lazy-image"))

        assert example.title
        assert example.modules["refactored"] == "pattern_gallery.patterns.proxy.lazy_image.refactored"

    def test_get_unknown_example(self, catalog):
        with pytest.raises(ExampleNotFoundError, match="proxy/remote-image"):
            GetExampleHandler(catalog).handle(GetExampleQuery(pattern=PatternName.PROXY, slug="remote-image"))


class TestRunHandlers:
    """Test the run command handlers with a mocked runner."""

    def setup_method(self):
        """Set up handlers over a mocked runner."""
        self.runner = Mock()
        self.runner.run.side_effect = self._fake_run
        self.demo_config = DemoConfig(seed=99, default_variant="refactored")

    @staticmethod
    def _fake_run(descriptor, variant, seed=None, live_console=None):
        success = not (descriptor.slug == "video-converter" and variant == Variant.BASIC)
        return RunResult(pattern=descriptor.pattern, slug=descriptor.slug, variant=variant,
                         lines=[f"{descriptor.key} {variant.value} {seed}"], success=success,
                         error=None if success else "boom")

    def test_run_example_uses_configured_defaults(self, catalog):
        handler = RunExampleHandler(catalog, self.runner, self.demo_config)

        result = handler.handle(RunExampleCommand(pattern=PatternName.BUILDER, slug="pizza"))

        assert result.variant == "refactored"
        assert result.lines == ["builder/pizza refactored 99"]

    def test_run_example_explicit_variant_and_seed(self, catalog):
        handler = RunExampleHandler(catalog, self.runner, self.demo_config)

        result = handler.handle(RunExampleCommand(pattern=PatternName.BUILDER, slug="pizza",
                                                  variant=Variant.BASIC, seed=3))

        assert result.lines == ["builder/pizza basic 3"]

    def test_compare_runs_both_variants_with_same_seed(self, catalog):
        handler = CompareExampleHandler(catalog, self.runner, self.demo_config)

        comparison = handler.handle(CompareExampleCommand(pattern=PatternName.FACADE, slug="home-cinema"))

        assert comparison.basic.variant == "basic"
        assert comparison.refactored.variant == "refactored"
        assert comparison.basic.lines[0].endswith("99")
        assert comparison.refactored.lines[0].endswith("99")

    def test_run_all_counts_failures(self, catalog):
        handler = RunAllExamplesHandler(catalog, self.runner, self.demo_config)

        summary = handler.handle(RunAllExamplesCommand(pattern=PatternName.FACADE))

        assert summary.total == 4
        assert summary.failed == 1
        assert summary.passed == 3
        assert summary.success is False
        assert [f.slug for f in summary.failures()] == ["video-converter"]

    def test_run_all_single_variant(self, catalog):
        handler = RunAllExamplesHandler(catalog, self.runner, self.demo_config)

        summary = handler.handle(RunAllExamplesCommand(variant=Variant.REFACTORED))

        assert summary.total == len(catalog)
        assert summary.success is True
        assert summary.to_summary_dict()["runs"][0]["variant"] == "refactored"


class TestCommandValidation:
    """Test command DTO validation."""

    def test_blank_slug_rejected(self):
        with pytest.raises(PydanticValidationError, match="must not be empty"):
            RunExampleCommand(pattern=PatternName.BUILDER, slug="   ")

    def test_slug_is_stripped(self):
        command = RunExampleCommand(pattern=PatternName.BUILDER, slug=" pizza ")

        assert command.slug == "pizza"

    def test_unknown_pattern_rejected(self):
        with pytest.raises(PydanticValidationError):
            RunExampleCommand(pattern="visitor", slug="pizza")
