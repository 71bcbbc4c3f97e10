"""Vehicles created by :class:`VehicleFactory`."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.factory.errors import UnknownProductTypeError


class Vehicle(ABC):
    def __init__(self, make: str, model: str, console: ConsolePort):
        self.make = make
        self.model = model
        self.console = console

    @abstractmethod
    def drive(self) -> None: ...


class Car(Vehicle):
    def drive(self) -> None:
        self.console.print(f"Driving {self.make} {self.model}")


class Motorcycle(Vehicle):
    def drive(self) -> None:
        self.console.print(f"Riding {self.make} {self.model}")


class VehicleFactory:
    VEHICLES: Dict[str, Type[Vehicle]] = {"car": Car, "motorcycle": Motorcycle}

    def __init__(self, console: ConsolePort):
        self.console = console

    def create_vehicle(self, vehicle_type: str, make: str, model: str) -> Vehicle:
        vehicle_class = self.VEHICLES.get(vehicle_type)
        if vehicle_class is None:
            raise UnknownProductTypeError("vehicle", vehicle_type, self.VEHICLES)
        return vehicle_class(make, model, self.console)


def run(context: DemoContext) -> None:
    factory = VehicleFactory(context.console)
    factory.create_vehicle("car", "Toyota", "Corolla").drive()
    factory.create_vehicle("motorcycle", "Honda", "CBR500R").drive()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
