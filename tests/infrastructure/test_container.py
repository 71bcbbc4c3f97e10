"""Tests for the dependency injection container and the CQRS buses."""
from typing import Optional
from unittest.mock import Mock

import pytest

from pattern_gallery.application.decorators import query_handler_class
from pattern_gallery.application.dto import ListPatternsQuery, RunExampleCommand
from pattern_gallery.domain.catalog import PatternName
from pattern_gallery.infrastructure.di.buses import (
    BusFactory,
    BusMiddleware,
    LoggingMiddleware,
    ValidationMiddleware,
)
from pattern_gallery.infrastructure.di.container import (
    DIContainer,
    get_container,
    reset_container,
)
from pattern_gallery.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    UntypedParameterError,
)


class Engine:
    pass


class Car:
    def __init__(self, engine: Engine, label: str = "plain"):
        self.engine = engine
        self.label = label


class Garage:
    def __init__(self, car: Car, spare: Optional[Engine] = None):
        self.car = car
        self.spare = spare


class Untyped:
    def __init__(self, thing):
        self.thing = thing


class Chicken:
    def __init__(self, egg: "Egg"):
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken):
        self.chicken = chicken


class TestDIContainer:
    """Test registration and autowiring."""

    def setup_method(self):
        self.container = DIContainer()

    def test_autowires_annotated_parameters(self):
        car = self.container.get(Car)

        assert isinstance(car.engine, Engine)
        assert car.label == "plain"

    def test_singleton_returns_same_instance(self):
        self.container.register_singleton(Engine)

        assert self.container.get(Engine) is self.container.get(Engine)

    def test_singleton_factory_runs_once(self):
        factory = Mock(side_effect=lambda c: Engine())

        def build(container):
            return factory(container)

        self.container.register_singleton(Engine, build)
        first = self.container.get(Engine)

        assert self.container.get(Engine) is first
        factory.assert_called_once()

    def test_factory_runs_on_every_resolution(self):
        self.container.register_factory(Engine, lambda c: Engine())

        assert self.container.get(Engine) is not self.container.get(Engine)

    def test_register_instance(self):
        engine = Engine()
        self.container.register_instance(Engine, engine)

        assert self.container.get(Car).engine is engine
        assert self.container.is_registered(Engine)

    def test_optional_dependency_resolved_only_when_registered(self):
        assert self.container.get(Garage).spare is None

        self.container.register_singleton(Engine)
        assert self.container.get(Garage).spare is self.container.get(Engine)

    def test_untyped_parameter(self):
        with pytest.raises(UntypedParameterError, match="no type annotation"):
            self.container.get(Untyped)

    def test_circular_dependency(self):
        with pytest.raises(DependencyResolutionError) as exc_info:
            self.container.get(Chicken)

        cause = exc_info.value
        while not isinstance(cause, CircularDependencyError) and cause.cause is not None:
            cause = cause.cause
        assert isinstance(cause, CircularDependencyError)

    def test_abstract_types_need_registration(self):
        from pattern_gallery.domain.base.ports import EventPublisherPort

        with pytest.raises(DependencyResolutionError, match="not registered"):
            self.container.get(EventPublisherPort)

    def test_clear(self):
        self.container.register_singleton(Engine)
        self.container.clear()

        assert not self.container.is_registered(Engine)

    def test_global_container_reset(self):
        container = get_container()
        container.register_singleton(Engine)

        reset_container()

        assert get_container() is not container
        assert not get_container().is_registered(Engine)


class TestBuses:
    """Test bus middleware and dispatch."""

    def setup_method(self):
        self.container = DIContainer()
        self.logger = Mock()
        self.query_bus, self.command_bus = BusFactory.create_buses(self.container, self.logger)

    def test_default_middleware(self):
        kinds = [type(m) for m in self.query_bus.middleware]

        assert kinds == [LoggingMiddleware, ValidationMiddleware]

    def test_query_dispatched_to_registered_handler(self, catalog):
        from pattern_gallery.application import queries  # noqa: F401
        from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog

        self.container.register_instance(ExampleCatalog, catalog)

        patterns = self.query_bus.execute(ListPatternsQuery())

        assert len(patterns) == 14

    def test_domain_errors_are_logged_at_debug_and_raised(self):
        from pattern_gallery.application import commands  # noqa: F401

        # Nothing provides EventPublisherPort, so the runner cannot be built
        with pytest.raises(DependencyResolutionError):
            self.command_bus.execute(RunExampleCommand(pattern=PatternName.BUILDER, slug="pizza"))
        assert not self.logger.error.called
        assert any("Rejected RunExampleCommand" in call.args[0]
                   for call in self.logger.debug.call_args_list)

    def test_unexpected_errors_are_logged_as_errors(self):
        from pattern_gallery.application import queries  # noqa: F401

        failing = Mock()
        failing.handle.side_effect = RuntimeError("catalog exploded")
        self.container.register_instance(query_handler_class(ListPatternsQuery), failing)

        with pytest.raises(RuntimeError, match="catalog exploded"):
            self.query_bus.execute(ListPatternsQuery())
        assert "Failed ListPatternsQuery" in self.logger.error.call_args.args[0]

    def test_unregistered_message_type(self):
        class Unknown:
            pass

        with pytest.raises(KeyError, match="No handler registered"):
            self.query_bus.execute(Unknown())

    def test_validation_middleware_rejects_none(self):
        with pytest.raises(ValueError, match="cannot be None"):
            ValidationMiddleware().execute(None, lambda: "unreachable")

    def test_validation_middleware_calls_validate_message(self):
        message = Mock()

        result = ValidationMiddleware().execute(message, lambda: "done")

        assert result == "done"
        message.validate_message.assert_called_once()

    def test_custom_middleware_runs_in_order(self):
        from pattern_gallery.application import queries  # noqa: F401

        calls = []

        class Recording(BusMiddleware):
            def execute(self, message, next_handler):
                calls.append("before")
                result = next_handler()
                calls.append("after")
                return result

        handler = Mock()
        handler.handle.side_effect = lambda query: calls.append("handler") or "ok"
        self.container.register_instance(query_handler_class(ListPatternsQuery), handler)
        self.query_bus.add_middleware(Recording())

        result = self.query_bus.execute(ListPatternsQuery())

        assert result == "ok"
        assert calls == ["before", "handler", "after"]
