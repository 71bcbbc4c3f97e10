"""Tests for the example runner service."""
from unittest.mock import Mock

import pytest

from pattern_gallery.application.services.example_runner import ExampleRunner
from pattern_gallery.domain.base.events import (
    ExampleRunCompleted,
    ExampleRunFailed,
    ExampleRunStarted,
)
from pattern_gallery.domain.catalog import ExampleDescriptor, PatternName, Variant
from pattern_gallery.infrastructure.console import RecordingConsole


def _descriptor():
    return ExampleDescriptor(pattern=PatternName.COMMAND, slug="calculator", title="Calculator",
                             summary="Undoable arithmetic.", package="demo.calculator")


class TestExampleRunner:
    """Test running example variants."""

    def setup_method(self):
        """Set up a runner over a mocked catalog."""
        self.catalog = Mock()
        self.publisher = Mock()
        self.runner = ExampleRunner(self.catalog, self.publisher)
        self.descriptor = _descriptor()

    def test_successful_run_records_output(self):
        # Arrange
        def demo(context):
            context.console.print("hello")
            context.console.error("careful")
        self.catalog.load_runner.return_value = demo

        # Act
        result = self.runner.run(self.descriptor, Variant.BASIC, seed=1)

        # Assert
        assert result.success is True
        assert result.lines == ["hello", "careful"]
        assert result.pattern == PatternName.COMMAND
        assert result.variant == Variant.BASIC
        self.catalog.load_runner.assert_called_once_with(self.descriptor, Variant.BASIC)

    def test_successful_run_publishes_started_and_completed(self):
        self.catalog.load_runner.return_value = lambda context: context.console.print("one")

        self.runner.run(self.descriptor, Variant.REFACTORED)

        events = [call.args[0] for call in self.publisher.publish.call_args_list]
        assert isinstance(events[0], ExampleRunStarted)
        assert isinstance(events[1], ExampleRunCompleted)
        assert events[1].line_count == 1
        assert events[1].aggregate_id == "command/calculator"

    def test_exception_is_captured_in_result(self):
        def demo(context):
            context.console.print("before")
            raise RuntimeError("boom")
        self.catalog.load_runner.return_value = demo

        result = self.runner.run(self.descriptor, Variant.BASIC)

        assert result.success is False
        assert result.error == "boom"
        assert result.error_type == "RuntimeError"
        assert result.lines == ["before"]
        failed = self.publisher.publish.call_args_list[-1].args[0]
        assert isinstance(failed, ExampleRunFailed)
        assert failed.error_code == "RuntimeError"

    def test_live_console_receives_output(self):
        self.catalog.load_runner.return_value = lambda context: context.console.print("live")
        live = RecordingConsole()

        result = self.runner.run(self.descriptor, Variant.BASIC, live_console=live)

        assert live.lines == ["live"]
        assert result.lines == ["live"]

    def test_same_seed_gives_same_random_values(self):
        self.catalog.load_runner.return_value = lambda context: context.console.print(
            str(context.rng.random()))

        first = self.runner.run(self.descriptor, Variant.BASIC, seed=42)
        second = self.runner.run(self.descriptor, Variant.BASIC, seed=42)

        assert first.lines == second.lines

    def test_clock_is_passed_to_examples(self, fixed_clock):
        runner = ExampleRunner(self.catalog, self.publisher, clock=fixed_clock)
        self.catalog.load_runner.return_value = lambda context: context.console.print(
            context.clock().isoformat())

        result = runner.run(self.descriptor, Variant.BASIC)

        assert result.lines == [fixed_clock().isoformat()]

    def test_loader_errors_propagate(self):
        self.catalog.load_runner.side_effect = ImportError("no module")

        with pytest.raises(ImportError, match="no module"):
            self.runner.run(self.descriptor, Variant.BASIC)
        self.publisher.publish.assert_not_called()
