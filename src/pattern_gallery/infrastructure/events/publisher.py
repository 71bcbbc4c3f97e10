"""In-process domain event publishing."""
from typing import Callable, Dict, List

from pattern_gallery.domain.base.events import DomainEvent
from pattern_gallery.domain.base.ports import EventPublisherPort
from pattern_gallery.infrastructure.logging.logger import get_logger

EventHandler = Callable[[DomainEvent], None]

MODES = ("logging", "sync")


class ConfigurableEventPublisher(EventPublisherPort):
    """
    Publishes events to subscribers keyed by event type name.

    In ``logging`` mode events are only written to the debug log. In ``sync``
    mode they are also handed to every subscriber, in registration order,
    before ``publish`` returns.
    """

    def __init__(self, mode: str = "sync"):
        if mode not in MODES:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of: {list(MODES)}")
        self.mode = mode
        self._subscribers: Dict[str, List[EventHandler]] = {}
        self._logger = get_logger(__name__)

    def register(self, event_type: str, handler: EventHandler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed {getattr(handler, '__name__', type(handler).__name__)} to {event_type}")

    def publish(self, event: DomainEvent) -> None:
        self._logger.debug(
            f"{event.event_type} on {event.aggregate_type} {event.aggregate_id} "
            f"at {event.occurred_at.isoformat()}"
        )
        if self.mode != "sync":
            return
        for handler in self._subscribers.get(event.event_type, ()):
            try:
                handler(event)
            except Exception as e:
                # Remaining subscribers still receive the event
                self._logger.error(f"Subscriber for {event.event_type} raised: {e}")

    def publish_batch(self, events: List[DomainEvent]) -> None:
        """Publish ``events`` one by one, in order."""
        for event in events:
            self.publish(event)

    def get_registered_handlers(self) -> Dict[str, int]:
        """Number of subscribers per event type."""
        return {event_type: len(handlers) for event_type, handlers in self._subscribers.items()}
