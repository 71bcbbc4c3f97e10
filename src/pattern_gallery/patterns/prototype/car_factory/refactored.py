"""
Cars produced by cloning registered prototypes.

A prototype pays for its engine, electronics and interior set-up once.
Clones copy that state and :meth:`Car.configure` reruns only the
initialisers whose options changed.
"""
import copy
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pattern_gallery.domain.base.exceptions import EntityNotFoundError, ValidationError
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

Clock = Callable[[], datetime]

BASE_FIELDS = ("brand", "model", "color", "doors")
ELECTRONICS_OPTIONS = frozenset({"gps", "bluetooth", "driving_assistance"})
INTERIOR_OPTIONS = frozenset({"seat_material", "air_conditioning"})


class PrototypeNotFoundError(EntityNotFoundError):
    """Raised when no prototype is registered under a key."""

    def __init__(self, key: str):
        super().__init__("Prototype", key)


class Car:
    def __init__(self, brand: str, model: str, color: str, doors: int, console: ConsolePort,
                 options: Optional[Dict[str, Any]] = None, clock: Clock = datetime.now):
        self.brand = brand
        self.model = model
        self.color = color
        self.doors = doors
        self.options: Dict[str, Any] = dict(options or {})
        self.console = console
        self.clock = clock
        self.created_at = clock()

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

    def clone(self) -> "Car":
        """Copy this car without running any initialiser. The clone gets a fresh creation date."""
        clone = copy.copy(self)
        clone.options = copy.deepcopy(self.options)
        clone.engine = copy.deepcopy(self.engine)
        clone.electronics = copy.deepcopy(self.electronics)
        clone.interior = copy.deepcopy(self.interior)
        clone.created_at = self.clock()
        return clone

    def configure(self, config: Dict[str, Any]) -> "Car":
        """
        Update base fields and merge options.

        Raises:
            ValidationError: If ``config`` names an unknown base field
        """
        for key, value in config.items():
            if key == "options":
                continue
            if key not in BASE_FIELDS:
                raise ValidationError(f"Unknown car field: {key}", field=key)
            setattr(self, key, value)

        options = config.get("options") or {}
        if options:
            self.options.update(options)
            changed = set(options)
            if any("engine" in key for key in changed):
                self.initialize_engine()
            if changed & ELECTRONICS_OPTIONS:
                self.configure_electronics()
            if changed & INTERIOR_OPTIONS:
                self.prepare_interior()
        return self

    def display_details(self) -> None:
        self.console.print(f"Car: {self.brand} {self.model}")
        self.console.print(f"Color: {self.color}")
        self.console.print(f"Doors: {self.doors}")
        self.console.print(f"Engine: {self.engine['type']}, {self.engine['power']}hp")
        self.console.print(f"GPS: {'Yes' if self.electronics['gps'] else 'No'}")
        self.console.print(f"Seats: {self.interior['seat_material']}")


class CarRegistry:
    def __init__(self) -> None:
        self.prototypes: Dict[str, Car] = {}

    def register(self, key: str, prototype: Car) -> None:
        self.prototypes[key] = prototype

    def unregister(self, key: str) -> None:
        self.prototypes.pop(key, None)

    def get(self, key: str) -> Optional[Car]:
        return self.prototypes.get(key)

    def keys(self) -> List[str]:
        return list(self.prototypes)

    def create_car(self, key: str, config: Optional[Dict[str, Any]] = None) -> Car:
        """
        Clone the prototype registered under ``key`` and configure the clone.

        Raises:
            PrototypeNotFoundError: If nothing is registered under ``key``
        """
        prototype = self.get(key)
        if prototype is None:
            raise PrototypeNotFoundError(key)
        return prototype.clone().configure(config or {})


def build_registry(console: ConsolePort, clock: Clock = datetime.now) -> CarRegistry:
    """Register the standard, luxury and sport Clio prototypes."""
    registry = CarRegistry()
    clio = Car("Renault", "Clio", "White", 5, console, {
        "engine_type": "petrol",
        "engine_power": 90,
        "seat_material": "fabric",
        "air_conditioning": True,
    }, clock)
    registry.register("clio", clio)
    registry.register("clio-luxury", clio.clone().configure({
        "color": "Black",
        "options": {"seat_material": "leather", "gps": True, "bluetooth": True},
    }))
    registry.register("clio-sport", clio.clone().configure({
        "model": "Clio RS",
        "doors": 3,
        "options": {"engine_power": 200, "seat_material": "sport leather", "driving_assistance": True},
    }))
    return registry


def run(context: DemoContext) -> None:
    console = context.console
    console.print("--- Creating prototypes ---")
    registry = build_registry(console, context.clock)

    console.print("--- Producing cars ---")
    cars = [
        registry.create_car("clio"),
        registry.create_car("clio-luxury", {"color": "Metallic grey"}),
        registry.create_car("clio-sport", {"color": "Racing red", "options": {"engine_power": 220}}),
        registry.create_car("clio", {
            "color": "Blue",
            "options": {"engine_type": "hybrid", "engine_power": 140, "gps": True},
        }),
    ]

    console.print("--- Cars produced ---")
    for car in cars:
        car.display_details()

    try:
        registry.create_car("clio-cabriolet")
    except PrototypeNotFoundError as e:
        console.error(str(e))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
