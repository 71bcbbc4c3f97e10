"""Coffee extras as decorators that wrap any beverage."""
from pattern_gallery.domain.catalog import DemoContext


class Coffee:
    def get_cost(self) -> float:
        return 5

    def get_description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator(Coffee):
    """Delegates to the wrapped coffee; subclasses add an extra."""

    extra_cost: float = 0
    extra_description: str = ""

    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def get_cost(self) -> float:
        return self.coffee.get_cost() + self.extra_cost

    def get_description(self) -> str:
        return f"{self.coffee.get_description()}, with {self.extra_description}"


class MilkDecorator(CoffeeDecorator):
    extra_cost = 1
    extra_description = "milk"


class SugarDecorator(CoffeeDecorator):
    extra_cost = 0.5
    extra_description = "sugar"


class CinnamonDecorator(CoffeeDecorator):
    extra_cost = 0.75
    extra_description = "cinnamon"


class WhippedCreamDecorator(CoffeeDecorator):
    extra_cost = 1.5
    extra_description = "whipped cream"


def run(context: DemoContext) -> None:
    def show(coffee: Coffee) -> None:
        context.console.print(f"{coffee.get_description()} costs {coffee.get_cost()}€")

    coffee: Coffee = Coffee()
    show(coffee)
    coffee = MilkDecorator(coffee)
    show(coffee)
    coffee = SugarDecorator(coffee)
    show(coffee)

    show(WhippedCreamDecorator(CinnamonDecorator(Coffee())))
    show(WhippedCreamDecorator(CinnamonDecorator(SugarDecorator(MilkDecorator(Coffee())))))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
