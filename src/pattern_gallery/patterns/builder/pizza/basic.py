"""Pizza built through a telescoping constructor."""
from typing import List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Pizza:
    def __init__(self, size: str, crust: str, sauce: str, cheese: Optional[str],
                 toppings: Optional[List[str]] = None):
        self.size = size
        self.crust = crust
        self.sauce = sauce
        self.cheese = cheese
        self.toppings = toppings or []

    def display_details(self, console: ConsolePort) -> None:
        console.print("----- Pizza -----")
        console.print(f"Size: {self.size}")
        console.print(f"Crust: {self.crust}")
        console.print(f"Sauce: {self.sauce}")
        console.print(f"Cheese: {self.cheese or 'None'}")
        console.print("Toppings:")
        if not self.toppings:
            console.print("  None")
        for topping in self.toppings:
            console.print(f"  - {topping}")
        console.print("-----------------")


def run(context: DemoContext) -> None:
    console = context.console

    Pizza("medium", "classic", "tomato", "mozzarella", ["ham", "mushrooms"]).display_details(console)

    # Every argument must be given, even when only the toppings differ
    Pizza("large", "thin", "tomato", "mozzarella",
          ["peppers", "onions", "olives"]).display_details(console)

    # No cheese means passing None in the right position
    Pizza("small", "thick", "tomato", None, ["garlic", "basil"]).display_details(console)

    # Nothing stops an invalid size or too many toppings
    Pizza("extra-large", "stuffed", "creme-fraiche", "mozzarella",
          ["chicken", "bacon", "egg", "onions", "corn", "peppers", "olives"]).display_details(console)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
