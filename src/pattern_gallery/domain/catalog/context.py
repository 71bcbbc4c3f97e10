"""Run-time context handed to every example program."""
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from pattern_gallery.domain.base.ports import ConsolePort


@dataclass
class DemoContext:
    """
    Everything an example needs from the outside world.

    Examples never call ``print``, ``random`` or ``datetime.now`` directly;
    they go through the console, the random source and the clock held here
    so a run can be recorded and replayed.
    """
    console: ConsolePort
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], datetime] = datetime.now

    @classmethod
    def seeded(cls, console: ConsolePort, seed: Optional[int] = None,
               clock: Optional[Callable[[], datetime]] = None) -> "DemoContext":
        """Build a context whose random source starts from ``seed``."""
        return cls(console=console, rng=random.Random(seed), clock=clock or datetime.now)
