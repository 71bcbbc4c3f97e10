"""Status updates published through a :class:`Subject`."""
from typing import Any, Dict, List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Subject:
    def __init__(self) -> None:
        self.observers: List[Any] = []

    def subscribe(self, observer: Any) -> None:
        if observer not in self.observers:
            self.observers.append(observer)

    def unsubscribe(self, observer: Any) -> None:
        self.observers = [existing for existing in self.observers if existing is not observer]

    def notify(self, data: Dict[str, Any]) -> None:
        for observer in list(self.observers):
            observer.update(data)


class User(Subject):
    def __init__(self, name: str, console: ConsolePort):
        super().__init__()
        self.name = name
        self.console = console
        self.status: Optional[str] = None

    def update_status(self, status: str) -> None:
        self.status = status
        self.console.print(f"{self.name} updated their status: {status}")
        self.notify({"user": self.name, "status": status})


class Follower:
    def __init__(self, name: str, console: ConsolePort):
        self.name = name
        self.console = console
        self.received: List[Dict[str, Any]] = []

    def update(self, data: Dict[str, Any]) -> None:
        self.received.append(data)
        self.console.print(f"{self.name} received an update: {data['user']} has a new status: {data['status']}")


def run(context: DemoContext) -> None:
    user = User("Alice", context.console)
    bob = Follower("Bob", context.console)
    charlie = Follower("Charlie", context.console)

    user.subscribe(bob)
    user.subscribe(charlie)
    user.update_status("I'm happy today!")

    user.unsubscribe(bob)
    user.update_status("A new day!")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
