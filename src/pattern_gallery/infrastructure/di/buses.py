"""
Query and command buses.

A bus looks up the handler class registered for a message, builds it through
the DI container and calls ``handle``. Middleware wraps that call; the first
middleware added is the outermost.
"""
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Tuple

from pattern_gallery.application.decorators import command_handler_class, query_handler_class
from pattern_gallery.domain.base.exceptions import DomainException
from pattern_gallery.domain.base.ports import LoggingPort
from pattern_gallery.infrastructure.di.container import DIContainer

Next = Callable[[], Any]


class BusMiddleware(ABC):
    """One step around a handler call."""

    @abstractmethod
    def execute(self, message: Any, next_handler: Next) -> Any:
        """Do this step's work and call ``next_handler`` to continue."""


class LoggingMiddleware(BusMiddleware):
    """
    Logs the message type and how long its handler took.

    Domain exceptions are logged at debug level and anything else as an error.
    """

    def __init__(self, logger: LoggingPort):
        self.logger = logger

    def execute(self, message: Any, next_handler: Next) -> Any:
        name = type(message).__name__
        started = time.perf_counter()
        self.logger.debug(f"Executing {name}")
        try:
            result = next_handler()
        except DomainException as e:
            self.logger.debug(f"Rejected {name} after {time.perf_counter() - started:.3f}s: {e}")
            raise
        except Exception as e:
            self.logger.error(f"Failed {name} after {time.perf_counter() - started:.3f}s: {e}")
            raise
        self.logger.debug(f"Completed {name} in {time.perf_counter() - started:.3f}s")
        return result


class ValidationMiddleware(BusMiddleware):
    """Rejects ``None`` and runs a message's own ``validate_message`` hook when it has one."""

    def execute(self, message: Any, next_handler: Next) -> Any:
        if message is None:
            raise ValueError("Message cannot be None")
        hook = getattr(message, 'validate_message', None)
        if callable(hook):
            hook()
        return next_handler()


class _Bus(ABC):
    def __init__(self, container: DIContainer, logger: LoggingPort):
        self.container = container
        self.logger = logger
        self.middleware: List[BusMiddleware] = [LoggingMiddleware(logger), ValidationMiddleware()]

    def add_middleware(self, middleware: BusMiddleware) -> None:
        self.middleware.append(middleware)
        self.logger.debug(f"Added middleware: {type(middleware).__name__}")

    @abstractmethod
    def _handler_class(self, message_type: type) -> type: ...

    def execute(self, message: Any) -> Any:
        """
        Dispatch ``message`` to its handler and return the handler's result.

        Raises:
            KeyError: If no handler is registered for the message type
        """
        def call_handler() -> Any:
            handler = self.container.get(self._handler_class(type(message)))
            return handler.handle(message)

        chain = call_handler
        for middleware in reversed(self.middleware):
            chain = _wrap(middleware, message, chain)
        return chain()


def _wrap(middleware: BusMiddleware, message: Any, next_handler: Next) -> Next:
    return lambda: middleware.execute(message, next_handler)


class QueryBus(_Bus):
    """Dispatches :class:`Query` messages."""

    def _handler_class(self, message_type: type) -> type:
        return query_handler_class(message_type)


class CommandBus(_Bus):
    """Dispatches :class:`Command` messages."""

    def _handler_class(self, message_type: type) -> type:
        return command_handler_class(message_type)


class BusFactory:
    """Builds a matching pair of buses over one container."""

    @staticmethod
    def create_buses(container: DIContainer, logger: LoggingPort) -> Tuple[QueryBus, CommandBus]:
        return QueryBus(container, logger), CommandBus(container, logger)
