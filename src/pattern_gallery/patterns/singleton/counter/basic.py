"""Two counters that never see each other's increments."""
from pattern_gallery.domain.catalog import DemoContext


class Counter:
    def __init__(self) -> None:
        self.count = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def decrement(self) -> int:
        self.count -= 1
        return self.count


def run(context: DemoContext) -> None:
    counter1 = Counter()
    counter2 = Counter()
    context.console.print(f"counter1: {counter1.increment()}")
    context.console.print(f"counter2: {counter2.increment()}")
    context.console.print(f"Same instance: {counter1 is counter2}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
