"""
Stock trading with buy and sell orders as commands.

Executed orders are kept so the last one can be undone. A sell that was
refused has nothing to revert, so undoing it is a no-op.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class StockCommand(ABC):
    def __init__(self, stock: "Stock", quantity: int):
        self.stock = stock
        self.quantity = quantity

    @abstractmethod
    def execute(self) -> bool:
        """Run the order. Returns whether the position changed."""

    @abstractmethod
    def undo(self) -> None: ...


class BuyStockCommand(StockCommand):
    def execute(self) -> bool:
        self.stock.quantity += self.quantity
        self.stock.console.print(
            f"Bought {self.quantity} shares of {self.stock.symbol} at {self.stock.price}")
        return True

    def undo(self) -> None:
        self.stock.quantity -= self.quantity
        self.stock.console.print(f"Undo buying {self.quantity} shares of {self.stock.symbol}")


class SellStockCommand(StockCommand):
    def __init__(self, stock: "Stock", quantity: int):
        super().__init__(stock, quantity)
        self.executed = False

    def execute(self) -> bool:
        if self.stock.quantity < self.quantity:
            self.stock.console.print(f"Not enough shares of {self.stock.symbol} to sell")
            return False
        self.stock.quantity -= self.quantity
        self.executed = True
        self.stock.console.print(
            f"Sold {self.quantity} shares of {self.stock.symbol} at {self.stock.price}")
        return True

    def undo(self) -> None:
        if not self.executed:
            return
        self.stock.quantity += self.quantity
        self.executed = False
        self.stock.console.print(f"Undo selling {self.quantity} shares of {self.stock.symbol}")


class Stock:
    def __init__(self, symbol: str, price: float, console: ConsolePort):
        self.symbol = symbol
        self.price = price
        self.quantity = 0
        self.console = console
        self.history: List[StockCommand] = []

    def execute_command(self, command: StockCommand) -> bool:
        done = command.execute()
        self.history.append(command)
        return done

    def buy(self, quantity: int) -> bool:
        return self.execute_command(BuyStockCommand(self, quantity))

    def sell(self, quantity: int) -> bool:
        return self.execute_command(SellStockCommand(self, quantity))

    def undo_last(self) -> None:
        if self.history:
            self.history.pop().undo()

    def update_price(self, price: float) -> None:
        self.price = price


def run(context: DemoContext) -> None:
    stock = Stock("AAPL", 150, context.console)
    stock.buy(10)
    stock.sell(5)
    stock.update_price(155)
    stock.sell(20)
    stock.undo_last()
    stock.undo_last()
    context.console.print(f"Position: {stock.quantity} shares of {stock.symbol}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
