"""Each module creates and configures its own logger."""
import random
from datetime import datetime
from typing import Callable

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

LEVELS = {"debug": 0, "info": 1, "warn": 2, "error": 3}


class Logger:
    def __init__(self, name: str, console: ConsolePort, level: str = "info",
                 clock: Callable[[], datetime] = datetime.now):
        self.name = name
        self.console = console
        self.level = level
        self.clock = clock
        self.console.print(f"Creating a new logger: {name}")

    def log(self, level: str, message: str) -> None:
        if LEVELS[level] >= LEVELS[self.level]:
            self.console.print(f"[{self.clock():%H:%M:%S}] [{level.upper()}] [{self.name}] {message}")


class UserModule:
    def __init__(self, console: ConsolePort, clock):
        self.logger = Logger("UserModule", console, clock=clock)

    def create_user(self, username: str) -> None:
        self.logger.log("debug", f"Creating user: {username}")
        self.logger.log("info", f"User created: {username}")


class CartModule:
    def __init__(self, console: ConsolePort, clock, rng: random.Random):
        self.logger = Logger("CartModule", console, clock=clock)
        self.rng = rng

    def add_to_cart(self, user: str, product: str) -> None:
        self.logger.log("info", f"Adding {product} to {user}'s cart")
        if self.rng.random() < 0.2:
            self.logger.log("error", f"Could not add {product}: out of stock")


def run(context: DemoContext) -> None:
    users = UserModule(context.console, context.clock)
    cart = CartModule(context.console, context.clock, context.rng)
    again = Logger("UserModule", context.console, clock=context.clock)
    context.console.print(f"Same logger for UserModule: {users.logger is again}")
    users.create_user("alice")
    cart.add_to_cart("alice", "Phone")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
