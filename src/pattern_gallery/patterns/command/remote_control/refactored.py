"""Remote control executing device commands, with undo."""
from abc import ABC, abstractmethod
from typing import List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class TV:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        self.console.print("TV is ON")

    def turn_off(self) -> None:
        self.is_on = False
        self.console.print("TV is OFF")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class TurnOnCommand(Command):
    def __init__(self, device: TV):
        self.device = device

    def execute(self) -> None:
        self.device.turn_on()

    def undo(self) -> None:
        self.device.turn_off()


class TurnOffCommand(Command):
    def __init__(self, device: TV):
        self.device = device

    def execute(self) -> None:
        self.device.turn_off()

    def undo(self) -> None:
        self.device.turn_on()


class RemoteControl:
    def __init__(self) -> None:
        self.history: List[Command] = []

    def execute_command(self, command: Command) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        if self.history:
            self.history.pop().undo()


def run(context: DemoContext) -> None:
    tv = TV(context.console)
    remote = RemoteControl()
    remote.execute_command(TurnOnCommand(tv))
    remote.execute_command(TurnOffCommand(tv))
    remote.undo()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
