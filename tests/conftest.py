"""Shared fixtures for the gallery test suite."""
import random
from datetime import datetime
from unittest.mock import Mock

import pytest

from pattern_gallery.domain.base.ports import EventPublisherPort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.infrastructure.console import RecordingConsole
from pattern_gallery.infrastructure.di.container import reset_container
from pattern_gallery.infrastructure.patterns import SingletonRegistry
from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog
from pattern_gallery.patterns.singleton.config_manager.refactored import ConfigManager
from pattern_gallery.patterns.singleton.counter.refactored import SingletonCounter
from pattern_gallery.patterns.singleton.database.refactored import Database
from pattern_gallery.patterns.singleton.logger_registry.refactored import ModuleLogger

FIXED_NOW = datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture(autouse=True)
def reset_global_state():
    """Every test starts without cached singletons or container registrations."""
    SingletonRegistry.get_instance().reset_all()
    reset_container()
    SingletonCounter.reset_instance()
    Database.reset_instance()
    ConfigManager.reset_instance()
    ModuleLogger.reset_registry()
    yield
    SingletonRegistry.get_instance().reset_all()
    reset_container()


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def demo_context(console, fixed_clock):
    """Seeded context writing to a recording console."""
    return DemoContext(console=console, rng=random.Random(42), clock=fixed_clock)


@pytest.fixture
def catalog():
    catalog = ExampleCatalog()
    catalog.discover()
    return catalog


@pytest.fixture
def mock_event_publisher():
    return Mock(spec=EventPublisherPort)
