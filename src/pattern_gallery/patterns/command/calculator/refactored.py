"""Calculator executing undoable arithmetic commands."""
from abc import ABC, abstractmethod
from typing import List

from pattern_gallery.domain.catalog import DemoContext


class CalculatorCommand(ABC):
    def __init__(self, value: float):
        self.value = value

    @abstractmethod
    def execute(self, current_value: float) -> float: ...

    @abstractmethod
    def undo(self, current_value: float) -> float: ...


class AddCommand(CalculatorCommand):
    def execute(self, current_value: float) -> float:
        return current_value + self.value

    def undo(self, current_value: float) -> float:
        return current_value - self.value


class SubtractCommand(CalculatorCommand):
    def execute(self, current_value: float) -> float:
        return current_value - self.value

    def undo(self, current_value: float) -> float:
        return current_value + self.value


class Calculator:
    def __init__(self) -> None:
        self.current_value: float = 0
        self.history: List[CalculatorCommand] = []

    def execute_command(self, command: CalculatorCommand) -> None:
        self.current_value = command.execute(self.current_value)
        self.history.append(command)

    def undo(self) -> None:
        """Revert the most recent command; does nothing when the history is empty."""
        if self.history:
            self.current_value = self.history.pop().undo(self.current_value)

    def get_current_value(self) -> float:
        return self.current_value


def run(context: DemoContext) -> None:
    calculator = Calculator()
    calculator.execute_command(AddCommand(5))
    calculator.execute_command(SubtractCommand(2))
    context.console.print(f"Current value: {calculator.get_current_value()}")
    calculator.undo()
    context.console.print(f"After undo: {calculator.get_current_value()}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
