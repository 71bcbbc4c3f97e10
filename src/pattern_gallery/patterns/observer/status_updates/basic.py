"""User calling each follower directly."""
from typing import List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Follower:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console

    def notify(self, message: str) -> None:
        self.console.print(f"{self.name} received a notification: {message}")


class User:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console
        self.status: Optional[str] = None
        self.followers: List[Follower] = []

    def add_follower(self, follower: Follower) -> None:
        self.followers.append(follower)

    def update_status(self, status: str) -> None:
        self.status = status
        self.console.print(f"{self.name} updated their status: {status}")
        for follower in self.followers:
            follower.notify(f"{self.name} has a new status: {status}")


def run(context: DemoContext) -> None:
    user = User("Alice", context.console)
    user.add_follower(Follower("Bob", context.console))
    user.add_follower(Follower("Charlie", context.console))
    user.update_status("I'm happy today!")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
