"""Every car variant built from scratch."""
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Car:
    def __init__(self, brand: str, model: str, color: str, doors: int, console: ConsolePort,
                 options: Optional[Dict[str, Any]] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.brand = brand
        self.model = model
        self.color = color
        self.doors = doors
        self.options = options or {}
        self.console = console
        self.created_at = clock()

        # Every construction pays for the full set-up.
        self.initialize_engine()
        self.configure_electronics()
        self.prepare_interior()

    def initialize_engine(self) -> None:
        self.console.print(f"Initializing engine for {self.brand} {self.model}...")
        self.engine = {
            "type": self.options.get("engine_type", "petrol"),
            "power": self.options.get("engine_power", 100),
        }

    def configure_electronics(self) -> None:
        self.console.print("Configuring electronics...")
        self.electronics = {
            "gps": self.options.get("gps", False),
            "bluetooth": self.options.get("bluetooth", False),
            "driving_assistance": self.options.get("driving_assistance", False),
        }

    def prepare_interior(self) -> None:
        self.console.print("Preparing interior...")
        self.interior = {
            "seat_material": self.options.get("seat_material", "fabric"),
            "air_conditioning": self.options.get("air_conditioning", False),
        }

    def display_details(self) -> None:
        self.console.print(f"Car: {self.brand} {self.model}")
        self.console.print(f"Color: {self.color}")
        self.console.print(f"Doors: {self.doors}")
        self.console.print(f"Engine: {self.engine['type']}, {self.engine['power']}hp")
        self.console.print(f"GPS: {'Yes' if self.electronics['gps'] else 'No'}")


def run(context: DemoContext) -> None:
    console = context.console
    cars = [
        Car("Renault", "Clio", "White", 5, console,
            {"engine_type": "petrol", "engine_power": 90, "seat_material": "fabric",
             "air_conditioning": True}, context.clock),
        Car("Renault", "Clio", "Metallic grey", 5, console,
            {"engine_type": "petrol", "engine_power": 90, "seat_material": "leather",
             "air_conditioning": True, "gps": True, "bluetooth": True}, context.clock),
        Car("Renault", "Clio RS", "Racing red", 3, console,
            {"engine_type": "petrol", "engine_power": 220, "seat_material": "sport leather",
             "air_conditioning": True, "driving_assistance": True}, context.clock),
        Car("Renault", "Clio", "Blue", 5, console,
            {"engine_type": "hybrid", "engine_power": 140, "seat_material": "fabric",
             "air_conditioning": True, "gps": True}, context.clock),
    ]
    for car in cars:
        car.display_details()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
