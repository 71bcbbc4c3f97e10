"""Vehicles constructed directly by the caller."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Car:
    def __init__(self, make: str, model: str, console: ConsolePort):
        self.make = make
        self.model = model
        self.console = console

    def drive(self) -> None:
        self.console.print(f"Driving {self.make} {self.model}")


class Motorcycle:
    def __init__(self, make: str, model: str, console: ConsolePort):
        self.make = make
        self.model = model
        self.console = console

    def drive(self) -> None:
        self.console.print(f"Riding {self.make} {self.model}")


def run(context: DemoContext) -> None:
    Car("Toyota", "Corolla", context.console).drive()
    Motorcycle("Honda", "CBR500R", context.console).drive()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
