"""Console port implementations."""
from .recording import RecordingConsole
from .rich_console import RichConsole, TeeConsole

__all__ = ["RecordingConsole", "RichConsole", "TeeConsole"]
