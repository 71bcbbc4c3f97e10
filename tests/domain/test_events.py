"""Tests for example run domain events."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.base.events import (
    ExampleRunCompleted,
    ExampleRunFailed,
    ExampleRunStarted,
)


def test_event_type_defaults_to_class_name():
    event = ExampleRunStarted(aggregate_id="builder/pizza", variant="basic")

    assert event.event_type == "ExampleRunStarted"
    assert event.aggregate_type == "example"
    assert event.event_id
    assert event.occurred_at.tzinfo is not None


def test_completed_event_carries_duration_and_line_count():
    event = ExampleRunCompleted(aggregate_id="builder/pizza", variant="refactored",
                                duration_ms=12.5, line_count=40)

    assert event.duration_ms == 12.5
    assert event.line_count == 40


def test_failed_event_carries_error():
    event = ExampleRunFailed(aggregate_id="facade/video-converter", variant="basic",
                             error_message="Unsupported format: webm",
                             error_code="UnsupportedFormatError", duration_ms=3.0)

    assert event.event_type == "ExampleRunFailed"
    assert event.error_code == "UnsupportedFormatError"


def test_events_are_immutable():
    event = ExampleRunStarted(aggregate_id="builder/pizza", variant="basic")

    with pytest.raises(PydanticValidationError):
        event.variant = "refactored"
