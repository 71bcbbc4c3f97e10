"""Home cinema components, shared by both variants."""
from typing import Optional

from pattern_gallery.domain.base.ports import ConsolePort


class Amplifier:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.volume = 0
        self.source: Optional[str] = None

    def on(self) -> None:
        self.console.print("Amplifier on")

    def off(self) -> None:
        self.console.print("Amplifier off")

    def set_volume(self, level: int) -> None:
        self.volume = level
        self.console.print(f"Volume set to {level}")

    def set_source(self, source: str) -> None:
        self.source = source
        self.console.print(f"Source set to {source}")


class DvdPlayer:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.movie: Optional[str] = None
        self.is_playing = False

    def on(self) -> None:
        self.console.print("DVD player on")

    def off(self) -> None:
        self.console.print("DVD player off")

    def play(self, movie: str) -> None:
        self.movie = movie
        self.is_playing = True
        self.console.print(f'Playing "{movie}"')

    def stop(self) -> None:
        self.is_playing = False
        self.console.print("Playback stopped")

    def eject(self) -> None:
        self.movie = None
        self.console.print("DVD ejected")


class Projector:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.input: Optional[str] = None

    def on(self) -> None:
        self.console.print("Projector on")

    def off(self) -> None:
        self.console.print("Projector off")

    def set_input(self, source: str) -> None:
        self.input = source
        self.console.print(f"Projector input set to {source}")

    def set_mode(self, mode: str) -> None:
        self.console.print(f"Projector mode set to {mode}")


class Lights:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.brightness = 100

    def on(self) -> None:
        self.brightness = 100
        self.console.print("Lights on")

    def off(self) -> None:
        self.brightness = 0
        self.console.print("Lights off")

    def dim(self, level: int) -> None:
        self.brightness = level
        self.console.print(f"Brightness set to {level}%")


class Screen:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.is_down = False

    def down(self) -> None:
        self.is_down = True
        self.console.print("Screen lowered")

    def up(self) -> None:
        self.is_down = False
        self.console.print("Screen raised")


class SurroundSound:
    def __init__(self, console: ConsolePort):
        self.console = console

    def on(self) -> None:
        self.console.print("Surround sound on")

    def off(self) -> None:
        self.console.print("Surround sound off")

    def set_volume(self, level: int) -> None:
        self.console.print(f"Surround sound volume set to {level}")

    def set_mode(self, mode: str) -> None:
        self.console.print(f"Surround sound mode set to {mode}")
