"""Tests for the configurable event publisher."""
from unittest.mock import Mock

import pytest

from pattern_gallery.domain.base.events import ExampleRunCompleted, ExampleRunStarted
from pattern_gallery.infrastructure.events import ConfigurableEventPublisher


def _started(slug="builder/pizza"):
    return ExampleRunStarted(aggregate_id=slug, variant="basic")


def test_sync_mode_calls_registered_handlers():
    # Arrange
    publisher = ConfigurableEventPublisher(mode="sync")
    handler = Mock()
    publisher.register("ExampleRunStarted", handler)
    event = _started()

    # Act
    publisher.publish(event)

    # Assert
    handler.assert_called_once_with(event)


def test_handlers_only_receive_their_event_type():
    publisher = ConfigurableEventPublisher()
    started_handler = Mock()
    completed_handler = Mock()
    publisher.register("ExampleRunStarted", started_handler)
    publisher.register("ExampleRunCompleted", completed_handler)

    publisher.publish(ExampleRunCompleted(aggregate_id="builder/pizza", variant="basic",
                                          duration_ms=1.0, line_count=3))

    started_handler.assert_not_called()
    completed_handler.assert_called_once()


def test_logging_mode_does_not_call_handlers():
    publisher = ConfigurableEventPublisher(mode="logging")
    handler = Mock()
    publisher.register("ExampleRunStarted", handler)

    publisher.publish(_started())

    handler.assert_not_called()


def test_failing_handler_does_not_stop_the_others():
    publisher = ConfigurableEventPublisher()
    failing = Mock(side_effect=RuntimeError("subscriber broke"))
    healthy = Mock()
    publisher.register("ExampleRunStarted", failing)
    publisher.register("ExampleRunStarted", healthy)

    publisher.publish(_started())

    healthy.assert_called_once()


def test_publish_batch():
    publisher = ConfigurableEventPublisher()
    handler = Mock()
    publisher.register("ExampleRunStarted", handler)

    publisher.publish_batch([_started("builder/pizza"), _started("decorator/coffee")])

    assert handler.call_count == 2


def test_registered_handler_counts():
    publisher = ConfigurableEventPublisher()
    publisher.register("ExampleRunStarted", Mock())
    publisher.register("ExampleRunStarted", Mock())

    assert publisher.get_registered_handlers() == {"ExampleRunStarted": 2}


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid mode 'async'"):
        ConfigurableEventPublisher(mode="async")
