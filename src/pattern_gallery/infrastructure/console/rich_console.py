"""Terminal console backed by rich."""
import sys
from typing import Iterable, Optional, TextIO

from rich.console import Console

from pattern_gallery.domain.base.ports import ConsolePort


class RichConsole:
    """Writes example output to stdout and errors to stderr through rich."""

    def __init__(self, color: bool = True, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None, width: Optional[int] = None):
        no_color = not color
        self._out = Console(file=stdout or sys.stdout, no_color=no_color,
                            highlight=False, width=width, soft_wrap=True)
        self._err = Console(file=stderr or sys.stderr, no_color=no_color,
                            highlight=False, width=width, soft_wrap=True)

    def print(self, message: str = "") -> None:
        self._out.print(message, markup=False, emoji=False)

    def error(self, message: str) -> None:
        self._err.print(message, markup=False, emoji=False, style=None if self._err.no_color else "red")

    def rule(self, title: str = "") -> None:
        """Draw a horizontal separator."""
        self._out.rule(title)


class TeeConsole:
    """Forwards every call to several consoles."""

    def __init__(self, consoles: Iterable[ConsolePort]):
        self._consoles = list(consoles)

    def print(self, message: str = "") -> None:
        for console in self._consoles:
            console.print(message)

    def error(self, message: str) -> None:
        for console in self._consoles:
            console.error(message)
