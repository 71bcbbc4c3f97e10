"""
Pizza built with a fluent builder.

:class:`PizzaBuilder` validates each step and accumulates price and
preparation time as it goes; :class:`PizzaDirector` encodes the house
recipes on top of it.
"""
from typing import List, Optional

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

SIZE_PRICES = {"small": 6.0, "medium": 8.0, "large": 10.0, "extra-large": 12.0}
CRUSTS = ["thin", "classic", "thick", "stuffed"]
STUFFED_CRUST_SURCHARGE = 2.0
SAUCES = ["tomato", "creme-fraiche", "pesto", "barbecue"]
CHEESE_PRICES = {"mozzarella": 1.0, "cheddar": 1.0, "emmental": 1.0, "goat": 1.5, "gorgonzola": 1.5}
TOPPINGS = [
    "ham", "mushrooms", "peppers", "onions", "olives", "garlic",
    "basil", "chicken", "bacon", "egg", "corn", "pineapple",
]
TOPPING_PRICE = 0.75
TOPPING_MINUTES = 1
MAX_TOPPINGS = 8
BAKE_MINUTES = {"light": 12, "standard": 15, "well-done": 18, "crispy": 20}


class PizzaValidationError(ValidationError):
    """Raised by a builder step given a value outside its menu."""


class Pizza:
    def __init__(self) -> None:
        self.size = ""
        self.crust = ""
        self.sauce = ""
        self.cheese: Optional[str] = None
        self.toppings: List[str] = []
        self.bake = "standard"
        self.preparation_minutes = 0
        self.price = 0.0

    def display_details(self, console: ConsolePort) -> None:
        console.print("----- Pizza -----")
        console.print(f"Size: {self.size}")
        console.print(f"Crust: {self.crust}")
        console.print(f"Sauce: {self.sauce}")
        console.print(f"Cheese: {self.cheese or 'None'}")
        console.print(f"Bake: {self.bake}")
        console.print(f"Preparation time: {self.preparation_minutes} minutes")
        console.print(f"Price: {self.price:.2f}€")
        console.print("Toppings:")
        if not self.toppings:
            console.print("  None")
        for topping in self.toppings:
            console.print(f"  - {topping}")
        console.print("-----------------")


def _check(value: str, allowed, field: str, label: str) -> None:
    if value not in allowed:
        raise PizzaValidationError(
            f"Invalid {label}. Accepted values: {', '.join(allowed)}", field=field)


class PizzaBuilder:
    """Fluent builder; every step returns the builder."""

    def __init__(self) -> None:
        self.pizza = Pizza()

    def reset(self) -> "PizzaBuilder":
        self.pizza = Pizza()
        return self

    def size(self, size: str) -> "PizzaBuilder":
        _check(size, list(SIZE_PRICES), "size", "size")
        self.pizza.size = size
        self.pizza.price += SIZE_PRICES[size]
        return self

    def crust(self, crust: str) -> "PizzaBuilder":
        _check(crust, CRUSTS, "crust", "crust type")
        self.pizza.crust = crust
        if crust == "stuffed":
            self.pizza.price += STUFFED_CRUST_SURCHARGE
        return self

    def sauce(self, sauce: str) -> "PizzaBuilder":
        _check(sauce, SAUCES, "sauce", "sauce type")
        self.pizza.sauce = sauce
        return self

    def cheese(self, cheese: Optional[str]) -> "PizzaBuilder":
        """Add a cheese; ``None`` leaves the pizza without one."""
        if cheese:
            _check(cheese, list(CHEESE_PRICES), "cheese", "cheese type")
            self.pizza.cheese = cheese
            self.pizza.price += CHEESE_PRICES[cheese]
        return self

    def add_topping(self, topping: str) -> "PizzaBuilder":
        _check(topping, TOPPINGS, "toppings", "topping")
        # Oven limit
        if len(self.pizza.toppings) >= MAX_TOPPINGS:
            raise PizzaValidationError(f"Maximum {MAX_TOPPINGS} toppings per pizza", field="toppings")
        self.pizza.toppings.append(topping)
        self.pizza.price += TOPPING_PRICE
        self.pizza.preparation_minutes += TOPPING_MINUTES
        return self

    def bake(self, bake: str) -> "PizzaBuilder":
        _check(bake, list(BAKE_MINUTES), "bake", "bake type")
        self.pizza.bake = bake
        self.pizza.preparation_minutes += BAKE_MINUTES[bake]
        return self

    def build(self) -> Pizza:
        """
        Return the pizza and start a fresh one.

        Raises:
            PizzaValidationError: If size, crust or sauce was never chosen
        """
        if not self.pizza.size:
            raise PizzaValidationError("Pizza size is required", field="size")
        if not self.pizza.crust:
            raise PizzaValidationError("Crust type is required", field="crust")
        if not self.pizza.sauce:
            raise PizzaValidationError("Sauce is required", field="sauce")
        pizza = self.pizza
        self.reset()
        return pizza


class PizzaDirector:
    """House recipes."""

    def __init__(self, builder: PizzaBuilder):
        self.builder = builder

    def make_margherita(self, size: str = "medium") -> Pizza:
        return (self.builder.reset()
                .size(size).crust("classic").sauce("tomato").cheese("mozzarella")
                .add_topping("basil")
                .bake("standard")
                .build())

    def make_vegetarian(self, size: str = "large") -> Pizza:
        return (self.builder.reset()
                .size(size).crust("thin").sauce("tomato").cheese("mozzarella")
                .add_topping("peppers").add_topping("onions")
                .add_topping("mushrooms").add_topping("olives")
                .bake("light")
                .build())

    def make_hawaiian(self, size: str = "medium") -> Pizza:
        return (self.builder.reset()
                .size(size).crust("classic").sauce("tomato").cheese("mozzarella")
                .add_topping("ham").add_topping("pineapple")
                .bake("well-done")
                .build())


def run(context: DemoContext) -> None:
    console = context.console
    builder = PizzaBuilder()

    console.print("Building a pizza with the builder:")
    try:
        custom = (builder.size("extra-large").crust("stuffed").sauce("creme-fraiche")
                  .cheese("cheddar")
                  .add_topping("chicken").add_topping("bacon").add_topping("onions").add_topping("corn")
                  .bake("crispy")
                  .build())
        custom.display_details(console)
    except PizzaValidationError as e:
        console.error(f"Error: {e}")

    director = PizzaDirector(builder)
    for pizza in (director.make_margherita(), director.make_vegetarian("large"), director.make_hawaiian()):
        pizza.display_details(console)

    # No cheese: simply skip the step
    try:
        (builder.size("small").crust("thick").sauce("tomato")
         .add_topping("garlic").add_topping("basil")
         .bake("well-done")
         .build()).display_details(console)
    except PizzaValidationError as e:
        console.error(f"Error: {e}")

    try:
        builder.size("gigantic").crust("classic").sauce("tomato").build()
    except PizzaValidationError as e:
        console.error(f"Validation error: {e}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
