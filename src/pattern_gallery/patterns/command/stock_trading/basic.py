"""Stock whose buy and sell change the position directly."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Stock:
    def __init__(self, symbol: str, price: float, console: ConsolePort):
        self.symbol = symbol
        self.price = price
        self.quantity = 0
        self.console = console

    def buy(self, quantity: int) -> None:
        self.quantity += quantity
        self.console.print(f"Bought {quantity} shares of {self.symbol} at {self.price}")

    def sell(self, quantity: int) -> None:
        if self.quantity >= quantity:
            self.quantity -= quantity
            self.console.print(f"Sold {quantity} shares of {self.symbol} at {self.price}")
        else:
            self.console.print(f"Not enough shares of {self.symbol} to sell")


def run(context: DemoContext) -> None:
    stock = Stock("AAPL", 150, context.console)
    stock.buy(10)
    stock.sell(5)
    stock.sell(20)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
