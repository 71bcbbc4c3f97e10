"""Calculator whose operations mutate the value with no way back."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Calculator:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.current_value = 0

    def add(self, value: float) -> None:
        self.current_value += value

    def subtract(self, value: float) -> None:
        self.current_value -= value

    def multiply(self, value: float) -> None:
        self.current_value *= value

    def divide(self, value: float) -> None:
        if value != 0:
            self.current_value /= value
        else:
            self.console.print("Cannot divide by zero")

    def get_current_value(self) -> float:
        return self.current_value


def run(context: DemoContext) -> None:
    calculator = Calculator(context.console)
    calculator.add(5)
    calculator.subtract(2)
    context.console.print(f"Current value: {calculator.get_current_value()}")
    calculator.divide(0)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
