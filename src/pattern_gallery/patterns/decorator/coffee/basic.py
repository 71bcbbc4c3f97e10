"""One subclass per combination of extras."""
from pattern_gallery.domain.catalog import DemoContext


class Coffee:
    def get_cost(self) -> float:
        return 5

    def get_description(self) -> str:
        return "Simple coffee"


class CoffeeWithMilk(Coffee):
    def get_cost(self) -> float:
        return super().get_cost() + 1

    def get_description(self) -> str:
        return super().get_description() + ", with milk"


class CoffeeWithSugar(Coffee):
    def get_cost(self) -> float:
        return super().get_cost() + 0.5

    def get_description(self) -> str:
        return super().get_description() + ", with sugar"


class CoffeeWithMilkAndSugar(CoffeeWithMilk):
    # Every new extra multiplies the number of classes like this one
    def get_cost(self) -> float:
        return super().get_cost() + 0.5

    def get_description(self) -> str:
        return "Simple coffee, with milk, with sugar"


def run(context: DemoContext) -> None:
    for coffee in (Coffee(), CoffeeWithMilk(), CoffeeWithSugar(), CoffeeWithMilkAndSugar()):
        context.console.print(f"{coffee.get_description()} costs {coffee.get_cost()}€")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
