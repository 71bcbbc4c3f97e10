"""Shapes constructed directly by the caller."""
import math

from pattern_gallery.domain.catalog import DemoContext


class Circle:
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2


class Rectangle:
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


def run(context: DemoContext) -> None:
    context.console.print(f"Circle area: {Circle(5).area()}")
    context.console.print(f"Rectangle area: {Rectangle(4, 6).area()}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
