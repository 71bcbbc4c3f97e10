"""Base event classes - foundation for event-driven notifications."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """Base class for all domain events."""
    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=_utcnow)
    event_type: str = ""
    aggregate_id: str
    aggregate_type: str
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def __init__(self, **data):
        # Set event_type based on class name if not provided
        if not data.get('event_type'):
            data['event_type'] = self.__class__.__name__
        super().__init__(**data)


class TimedEvent(DomainEvent):
    """Base class for events that track duration."""
    duration_ms: float


class ErrorEvent(DomainEvent):
    """Base class for events that track failures."""
    error_message: str
    error_code: Optional[str] = None


# =============================================================================
# EXAMPLE RUN EVENTS
# =============================================================================

class ExampleRunStarted(DomainEvent):
    """An example variant started running."""
    aggregate_type: str = "example"
    variant: str


class ExampleRunCompleted(TimedEvent):
    """An example variant ran to completion."""
    aggregate_type: str = "example"
    variant: str
    line_count: int


class ExampleRunFailed(ErrorEvent):
    """An example variant raised an exception that escaped its demo."""
    aggregate_type: str = "example"
    variant: str
    duration_ms: float
