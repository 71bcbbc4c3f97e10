"""In-memory console that records everything an example writes."""
from typing import List, Tuple

STDOUT = "stdout"
STDERR = "stderr"


class RecordingConsole:
    """
    Console port implementation that keeps the output in memory.

    Multi-line messages are split so ``lines`` always holds one entry per line.
    """

    def __init__(self) -> None:
        self.entries: List[Tuple[str, str]] = []

    def print(self, message: str = "") -> None:
        self._record(STDOUT, message)

    def error(self, message: str) -> None:
        self._record(STDERR, message)

    def _record(self, stream: str, message: str) -> None:
        for line in str(message).split("\n"):
            self.entries.append((stream, line))

    @property
    def lines(self) -> List[str]:
        """Every recorded line, regular and error, in order."""
        return [text for _, text in self.entries]

    @property
    def errors(self) -> List[str]:
        return [text for stream, text in self.entries if stream == STDERR]

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def contains(self, fragment: str) -> bool:
        """True when any recorded line contains ``fragment``."""
        return any(fragment in line for line in self.lines)

    def clear(self) -> None:
        self.entries.clear()
