"""A counter with exactly one instance."""
import threading
from typing import Optional

from pattern_gallery.domain.base.exceptions import DomainException
from pattern_gallery.domain.catalog import DemoContext


class SingletonViolationError(DomainException):
    """Raised when a second instance of a singleton is constructed."""

    def __init__(self, class_name: str):
        super().__init__(f"Only one {class_name} instance can be created", "SINGLETON_VIOLATION",
                         {"class": class_name})


class Counter:
    _instance: Optional["Counter"] = None

    def __init__(self) -> None:
        if Counter._instance is not None:
            raise SingletonViolationError(type(self).__name__)
        self.count = 0
        Counter._instance = self

    def increment(self) -> int:
        self.count += 1
        return self.count

    def decrement(self) -> int:
        self.count -= 1
        return self.count


class SingletonCounter:
    """Access point that creates the :class:`Counter` on first use."""

    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> Counter:
        if Counter._instance is None:
            with cls._lock:
                if Counter._instance is None:
                    Counter()
        return Counter._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            Counter._instance = None


def run(context: DemoContext) -> None:
    console = context.console
    SingletonCounter.reset_instance()

    counter_a = SingletonCounter.get_instance()
    counter_b = SingletonCounter.get_instance()
    console.print(f"counter_a: {counter_a.increment()}")
    console.print(f"counter_b: {counter_b.increment()}")
    console.print(f"Same instance: {counter_a is counter_b}")

    try:
        Counter()
    except SingletonViolationError as e:
        console.error(str(e))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
