"""Base domain building blocks: exceptions, events and ports."""
from .events import (
    DomainEvent,
    ErrorEvent,
    ExampleRunCompleted,
    ExampleRunFailed,
    ExampleRunStarted,
    TimedEvent,
)
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from .ports import ConsolePort, EventPublisherPort, LoggingPort

__all__ = [
    "DomainEvent",
    "ErrorEvent",
    "TimedEvent",
    "ExampleRunStarted",
    "ExampleRunCompleted",
    "ExampleRunFailed",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConfigurationError",
    "ConsolePort",
    "LoggingPort",
    "EventPublisherPort",
]
