"""Command handlers that run example programs."""
from typing import List, Optional

from pattern_gallery.application.decorators import command_handler
from pattern_gallery.application.dto import (
    CompareExampleCommand,
    ComparisonDTO,
    RunAllExamplesCommand,
    RunExampleCommand,
    RunResultDTO,
    RunSummaryResponse,
)
from pattern_gallery.application.interfaces import CommandHandler
from pattern_gallery.application.services.example_runner import ExampleRunner
from pattern_gallery.config.schemas import DemoConfig
from pattern_gallery.domain.catalog import Variant
from pattern_gallery.infrastructure.logging.logger import get_logger
from pattern_gallery.infrastructure.registry.example_catalog import ExampleCatalog


class _RunHandlerBase:
    """Shared defaults for the run handlers."""

    def __init__(self, catalog: ExampleCatalog, runner: ExampleRunner, demo_config: DemoConfig):
        self._catalog = catalog
        self._runner = runner
        self._demo_config = demo_config
        self._logger = get_logger(self.__class__.__module__)

    def _seed(self, requested: Optional[int]) -> Optional[int]:
        return requested if requested is not None else self._demo_config.seed

    def _variant(self, requested: Optional[Variant]) -> Variant:
        return requested or Variant(self._demo_config.default_variant)


@command_handler(RunExampleCommand)
class RunExampleHandler(_RunHandlerBase, CommandHandler[RunExampleCommand, RunResultDTO]):
    """Handler for running one example variant."""

    def handle(self, command: RunExampleCommand) -> RunResultDTO:
        descriptor = self._catalog.get_example(command.pattern, command.slug)
        result = self._runner.run(descriptor, self._variant(command.variant),
                                  seed=self._seed(command.seed))
        return RunResultDTO.from_result(result)


@command_handler(CompareExampleCommand)
class CompareExampleHandler(_RunHandlerBase, CommandHandler[CompareExampleCommand, ComparisonDTO]):
    """Handler for running both variants of an example with the same seed."""

    def handle(self, command: CompareExampleCommand) -> ComparisonDTO:
        descriptor = self._catalog.get_example(command.pattern, command.slug)
        seed = self._seed(command.seed)
        basic = self._runner.run(descriptor, Variant.BASIC, seed=seed)
        refactored = self._runner.run(descriptor, Variant.REFACTORED, seed=seed)
        return ComparisonDTO(
            pattern=descriptor.pattern.value,
            slug=descriptor.slug,
            basic=RunResultDTO.from_result(basic),
            refactored=RunResultDTO.from_result(refactored),
        )


@command_handler(RunAllExamplesCommand)
class RunAllExamplesHandler(_RunHandlerBase, CommandHandler[RunAllExamplesCommand, RunSummaryResponse]):
    """Handler for running every example, or every example of one pattern."""

    def handle(self, command: RunAllExamplesCommand) -> RunSummaryResponse:
        variants: List[Variant] = [command.variant] if command.variant else list(Variant)
        seed = self._seed(command.seed)
        results: List[RunResultDTO] = []

        for descriptor in self._catalog.list_examples(command.pattern):
            for variant in variants:
                if not descriptor.has_variant(variant):
                    continue
                results.append(RunResultDTO.from_result(
                    self._runner.run(descriptor, variant, seed=seed)))

        failed = sum(1 for result in results if not result.success)
        self._logger.debug(f"Ran {len(results)} examples, {failed} failed")
        return RunSummaryResponse(
            success=failed == 0,
            message=f"{len(results) - failed}/{len(results)} example runs succeeded",
            total=len(results),
            passed=len(results) - failed,
            failed=failed,
            results=results,
        )
