"""Order manager whose operations are hard-wired methods."""
from typing import List

from pattern_gallery.domain.catalog import DemoContext


class OrderManager:
    def __init__(self) -> None:
        self.orders: List[str] = []

    def place_order(self, order: str, order_id: str) -> str:
        self.orders.append(order_id)
        return f"You have successfully ordered {order} ({order_id})"

    def track_order(self, order_id: str) -> str:
        return f"Your order {order_id} will arrive in 20 minutes."

    def cancel_order(self, order_id: str) -> str:
        self.orders = [existing for existing in self.orders if existing != order_id]
        return f"You have canceled your order {order_id}"


def run(context: DemoContext) -> None:
    manager = OrderManager()
    context.console.print(manager.place_order("Pad Thai", "1234"))
    context.console.print(manager.track_order("1234"))
    context.console.print(manager.cancel_order("1234"))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
