"""Domain ports - abstractions implemented by the infrastructure layer."""
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Protocol, runtime_checkable

from pattern_gallery.domain.base.events import DomainEvent


@runtime_checkable
class ConsolePort(Protocol):
    """Where example programs write their human-readable output."""

    def print(self, message: str = "") -> None:
        """Write one line of regular output."""
        ...

    def error(self, message: str) -> None:
        """Write one line of error output."""
        ...


class LoggingPort(Protocol):
    """Port for structured logging."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...


class EventPublisherPort(ABC):
    """Port for publishing domain events."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publish a single domain event."""

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publish multiple domain events."""

    @abstractmethod
    def register(self, event_type: str, handler: Callable[[DomainEvent], None]) -> None:
        """Register a handler for an event type name."""
