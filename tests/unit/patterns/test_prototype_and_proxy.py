"""Tests for the car prototypes and the lazy image proxy."""
import pytest

from pattern_gallery.domain.base.exceptions import EntityNotFoundError, ValidationError
from pattern_gallery.patterns.prototype.car_factory.refactored import (
    Car,
    CarRegistry,
    PrototypeNotFoundError,
    build_registry,
)
from pattern_gallery.patterns.proxy.lazy_image.refactored import ImageProxy


class TestCarPrototypes:
    """Test cloning and configuring cars."""

    @pytest.fixture(autouse=True)
    def _registry(self, console, fixed_clock):
        self.console = console
        self.registry = build_registry(console, fixed_clock)
        console.clear()

    def test_registered_prototypes(self):
        assert self.registry.keys() == ["clio", "clio-luxury", "clio-sport"]

    def test_luxury_prototype(self):
        luxury = self.registry.get("clio-luxury")

        assert luxury.color == "Black"
        assert luxury.interior["seat_material"] == "leather"
        assert luxury.electronics == {"gps": True, "bluetooth": True, "driving_assistance": False}
        assert luxury.engine == {"type": "petrol", "power": 90}

    def test_sport_prototype(self):
        sport = self.registry.get("clio-sport")

        assert (sport.model, sport.doors) == ("Clio RS", 3)
        assert sport.engine["power"] == 200
        assert sport.interior == {"seat_material": "sport leather", "air_conditioning": True}
        assert sport.electronics["driving_assistance"] is True

    def test_clone_skips_initialisers(self):
        car = self.registry.create_car("clio")

        assert self.console.lines == []
        assert car is not self.registry.get("clio")

    def test_clone_is_independent(self):
        car = self.registry.create_car("clio", {"color": "Blue", "options": {"gps": True}})
        prototype = self.registry.get("clio")

        assert car.color == "Blue"
        assert car.electronics["gps"] is True
        assert prototype.color == "White"
        assert prototype.electronics["gps"] is False
        assert "gps" not in prototype.options

    def test_configure_reruns_only_affected_initialisers(self):
        self.registry.create_car("clio-sport", {"options": {"engine_power": 220}})

        assert self.console.lines == ["Initializing engine for Renault Clio RS..."]

    def test_unknown_field(self):
        with pytest.raises(ValidationError, match="Unknown car field: wheels"):
            self.registry.create_car("clio", {"wheels": 3})

    def test_unknown_prototype(self):
        with pytest.raises(PrototypeNotFoundError, match="Prototype not found: clio-cabriolet"):
            self.registry.create_car("clio-cabriolet")

    def test_prototype_error_is_not_found(self):
        assert issubclass(PrototypeNotFoundError, EntityNotFoundError)

    def test_unregister(self):
        registry = CarRegistry()
        registry.register("van", Car("Renault", "Kangoo", "White", 5, self.console))

        registry.unregister("van")
        registry.unregister("van")

        assert registry.keys() == []

    def test_default_options(self):
        car = Car("Renault", "Twingo", "Yellow", 3, self.console)

        assert car.engine == {"type": "petrol", "power": 100}
        assert car.interior["seat_material"] == "fabric"


class TestImageProxy:
    """Test deferred loading."""

    def test_not_loaded_until_displayed(self, console):
        proxy = ImageProxy("holidays.jpg", console)

        assert proxy.is_loaded is False
        assert console.lines == []

    def test_metadata_without_loading(self, console):
        proxy = ImageProxy("holidays.jpg", console)

        metadata = proxy.get_metadata()

        assert metadata == {"filename": "holidays.jpg", "size": "10MB", "dimensions": "1920x1080"}
        assert proxy.is_loaded is False

    def test_loads_once(self, console):
        proxy = ImageProxy("holidays.jpg", console)

        proxy.display()
        proxy.display()

        assert proxy.is_loaded is True
        assert console.lines.count("Loading image holidays.jpg...") == 1
        assert console.lines.count("Displaying image: holidays.jpg") == 2
