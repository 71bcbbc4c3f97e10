"""Application bootstrap - DI-based wiring of configuration, logging and buses."""

from __future__ import annotations

from typing import Optional

from pattern_gallery.config import AppConfig, DemoConfig, OutputConfig
from pattern_gallery.config.manager import ConfigurationManager, get_config_manager
from pattern_gallery.domain.base.ports import EventPublisherPort, LoggingPort
from pattern_gallery.infrastructure.di.buses import BusFactory, CommandBus, QueryBus
from pattern_gallery.infrastructure.di.container import DIContainer, get_container
from pattern_gallery.infrastructure.events import ConfigurableEventPublisher
from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging
from pattern_gallery.infrastructure.patterns.singleton_registry import SingletonRegistry
from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog


class Application:
    """Application context: owns the container and exposes the buses."""

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None,
                 container: Optional[DIContainer] = None) -> None:
        self.config_path = config_path
        self._config_manager = config_manager
        self._container = container
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    @property
    def container(self) -> DIContainer:
        if self._container is None:
            self._container = get_container()
        return self._container

    def initialize(self) -> "Application":
        """Configure logging and register services. Safe to call more than once."""
        if self._initialized:
            return self

        app_config = self.config
        setup_logging(app_config.logging)
        self.logger.debug("Initializing application", environment=app_config.environment)

        register_services(self.container, self.config_manager)

        self._initialized = True
        return self

    def get_query_bus(self) -> QueryBus:
        self.initialize()
        return self.container.get(QueryBus)

    def get_command_bus(self) -> CommandBus:
        self.initialize()
        return self.container.get(CommandBus)


def register_services(container: DIContainer, config_manager: ConfigurationManager) -> None:
    """Register configuration, catalog, runner, handlers and buses with ``container``."""
    # Importing the handler modules registers them with the CQRS decorators
    from pattern_gallery.application import commands as _commands  # noqa: F401
    from pattern_gallery.application import queries as _queries  # noqa: F401
    from pattern_gallery.application.services.example_runner import ExampleRunner

    container.register_instance(AppConfig, config_manager.app_config)
    container.register_factory(DemoConfig, lambda c: c.get(AppConfig).demo)
    container.register_factory(OutputConfig, lambda c: c.get(AppConfig).output)

    container.register_singleton(LoggingPort, lambda c: get_logger("pattern_gallery.cqrs"))
    container.register_singleton(EventPublisherPort, lambda c: ConfigurableEventPublisher(mode="sync"))
    # The registry owns the instance so get_example_catalog() and the container agree
    container.register_singleton(ExampleCatalog, lambda c: SingletonRegistry.get_instance().get(ExampleCatalog))
    container.register_singleton(ExampleRunner)

    logging_port = container.get(LoggingPort)
    query_bus, command_bus = BusFactory.create_buses(container, logging_port)
    container.register_instance(QueryBus, query_bus)
    container.register_instance(CommandBus, command_bus)


def create_application(config_path: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path).initialize()
