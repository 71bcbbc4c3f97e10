"""Helper for running an example module directly from the command line."""
from typing import Callable, Optional

from pattern_gallery.domain.catalog import DemoContext


def run_standalone(run: Callable[[DemoContext], None], seed: Optional[int] = None) -> None:
    """Run ``run`` against a terminal console, coloured as the output settings say."""
    from pattern_gallery.config import OutputConfig, get_config_manager
    from pattern_gallery.infrastructure.console import RichConsole

    color = get_config_manager().get_typed(OutputConfig).color
    run(DemoContext.seeded(RichConsole(color=color), seed))
