"""
Order manager driven by command objects.

The manager only knows how to execute a command against its order list;
new operations are new command classes.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_gallery.domain.catalog import DemoContext


class OrderCommand(ABC):
    @abstractmethod
    def execute(self, orders: List[str]) -> str:
        """Apply the command to ``orders`` and return the customer message."""


class PlaceOrderCommand(OrderCommand):
    def __init__(self, order: str, order_id: str):
        self.order = order
        self.order_id = order_id

    def execute(self, orders: List[str]) -> str:
        orders.append(self.order_id)
        return f"You have successfully ordered {self.order} ({self.order_id})"


class TrackOrderCommand(OrderCommand):
    def __init__(self, order_id: str):
        self.order_id = order_id

    def execute(self, orders: List[str]) -> str:
        return f"Your order {self.order_id} will arrive in 20 minutes."


class CancelOrderCommand(OrderCommand):
    def __init__(self, order_id: str):
        self.order_id = order_id

    def execute(self, orders: List[str]) -> str:
        orders[:] = [order_id for order_id in orders if order_id != self.order_id]
        return f"You have canceled your order {self.order_id}"


class OrderManager:
    def __init__(self) -> None:
        self.orders: List[str] = []

    def execute(self, command: OrderCommand) -> str:
        return command.execute(self.orders)


def run(context: DemoContext) -> None:
    manager = OrderManager()
    context.console.print(manager.execute(PlaceOrderCommand("Pad Thai", "1234")))
    context.console.print(manager.execute(PlaceOrderCommand("Green curry", "5678")))
    context.console.print(manager.execute(TrackOrderCommand("1234")))
    context.console.print(manager.execute(CancelOrderCommand("1234")))
    context.console.print(f"Open orders: {', '.join(manager.orders)}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
