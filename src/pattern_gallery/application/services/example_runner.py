"""Runs example programs and records what they print."""
import time
from datetime import datetime
from typing import Callable, Optional

from pattern_gallery.domain.base.events import (
    ExampleRunCompleted,
    ExampleRunFailed,
    ExampleRunStarted,
)
from pattern_gallery.domain.base.ports import ConsolePort, EventPublisherPort
from pattern_gallery.domain.catalog import DemoContext, ExampleDescriptor, RunResult, Variant
from pattern_gallery.infrastructure.console import RecordingConsole, TeeConsole
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog


class ExampleRunner:
    """
    Executes one variant of an example inside a fresh :class:`DemoContext`.

    Output is always recorded; a ``live_console`` additionally receives it as
    it is produced. An exception escaping the example is captured in the
    returned :class:`RunResult` and never propagates.
    """

    def __init__(self, catalog: ExampleCatalog, event_publisher: EventPublisherPort,
                 clock: Optional[Callable[[], datetime]] = None):
        self._catalog = catalog
        self._event_publisher = event_publisher
        self._clock = clock or datetime.now
        self._logger = get_logger(__name__)

    def run(self, descriptor: ExampleDescriptor, variant: Variant,
            seed: Optional[int] = None,
            live_console: Optional[ConsolePort] = None) -> RunResult:
        runner = self._catalog.load_runner(descriptor, variant)

        recorder = RecordingConsole()
        console: ConsolePort = recorder if live_console is None else TeeConsole([recorder, live_console])
        context = DemoContext.seeded(console, seed, clock=self._clock)

        self._event_publisher.publish(ExampleRunStarted(
            aggregate_id=descriptor.key, variant=variant.value))
        self._logger.debug(f"Running {descriptor.key} ({variant.value})", seed=seed)

        start = time.perf_counter()
        try:
            runner(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self._logger.warning(f"Example {descriptor.key} ({variant.value}) failed: {e}")
            self._event_publisher.publish(ExampleRunFailed(
                aggregate_id=descriptor.key, variant=variant.value,
                error_message=str(e), error_code=type(e).__name__,
                duration_ms=duration_ms))
            return RunResult(
                pattern=descriptor.pattern, slug=descriptor.slug, variant=variant,
                lines=recorder.lines, success=False, error=str(e),
                error_type=type(e).__name__, duration_ms=duration_ms,
            )

        duration_ms = (time.perf_counter() - start) * 1000
        self._event_publisher.publish(ExampleRunCompleted(
            aggregate_id=descriptor.key, variant=variant.value,
            duration_ms=duration_ms, line_count=len(recorder.lines)))
        return RunResult(
            pattern=descriptor.pattern, slug=descriptor.slug, variant=variant,
            lines=recorder.lines, success=True, duration_ms=duration_ms,
        )
