"""Tests for the pizza builder."""
import pytest

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.patterns.builder.pizza.refactored import (
    MAX_TOPPINGS,
    PizzaBuilder,
    PizzaDirector,
    PizzaValidationError,
)


class TestPizzaBuilder:
    """Test step validation and pricing."""

    def setup_method(self):
        self.builder = PizzaBuilder()

    def test_price_and_time_accumulate(self):
        pizza = (self.builder.size("extra-large").crust("stuffed").sauce("creme-fraiche")
                 .cheese("goat").add_topping("chicken").add_topping("bacon")
                 .bake("crispy").build())

        # 12 + 2 stuffed + 1.5 goat + 2 * 0.75
        assert pizza.price == pytest.approx(17.0)
        assert pizza.preparation_minutes == 22
        assert pizza.toppings == ["chicken", "bacon"]

    def test_cheese_is_optional(self):
        pizza = self.builder.size("small").crust("thick").sauce("tomato").cheese(None).build()

        assert pizza.cheese is None
        assert pizza.price == 6.0

    def test_build_resets_builder(self):
        first = self.builder.size("small").crust("thin").sauce("pesto").build()

        assert self.builder.pizza is not first
        assert self.builder.pizza.size == ""

    @pytest.mark.parametrize("missing, message", [
        ("size", "Pizza size is required"),
        ("crust", "Crust type is required"),
        ("sauce", "Sauce is required"),
    ])
    def test_required_steps(self, missing, message):
        steps = {"size": "medium", "crust": "classic", "sauce": "tomato"}
        for step, value in steps.items():
            if step != missing:
                getattr(self.builder, step)(value)

        with pytest.raises(PizzaValidationError, match=message) as exc_info:
            self.builder.build()
        assert exc_info.value.field == missing

    def test_invalid_choice(self):
        with pytest.raises(PizzaValidationError, match="Invalid size. Accepted values: small, medium"):
            self.builder.size("gigantic")

    def test_topping_limit(self):
        for _ in range(MAX_TOPPINGS):
            self.builder.add_topping("olives")

        with pytest.raises(PizzaValidationError, match="Maximum 8 toppings"):
            self.builder.add_topping("olives")

    def test_validation_error_is_a_domain_validation_error(self):
        with pytest.raises(ValidationError):
            self.builder.sauce("ketchup")


class TestPizzaDirector:
    """Test house recipes."""

    def setup_method(self):
        self.director = PizzaDirector(PizzaBuilder())

    def test_margherita(self):
        pizza = self.director.make_margherita()

        assert pizza.price == pytest.approx(9.75)
        assert pizza.preparation_minutes == 16
        assert pizza.toppings == ["basil"]

    def test_vegetarian(self):
        pizza = self.director.make_vegetarian("large")

        assert pizza.crust == "thin"
        assert pizza.price == pytest.approx(14.0)
        assert pizza.preparation_minutes == 16

    def test_recipes_do_not_leak_into_each_other(self):
        self.director.make_vegetarian()

        hawaiian = self.director.make_hawaiian()

        assert hawaiian.toppings == ["ham", "pineapple"]
        assert hawaiian.bake == "well-done"
