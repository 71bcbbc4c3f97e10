"""Shapes created by :class:`ShapeFactory`."""
import math
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.factory.errors import UnknownProductTypeError


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class ShapeFactory:
    SHAPES: Dict[str, Type[Shape]] = {"circle": Circle, "rectangle": Rectangle}

    def create_shape(self, shape_type: str, *args: float) -> Shape:
        shape_class = self.SHAPES.get(shape_type)
        if shape_class is None:
            raise UnknownProductTypeError("shape", shape_type, self.SHAPES)
        return shape_class(*args)


def run(context: DemoContext) -> None:
    factory = ShapeFactory()
    context.console.print(f"Circle area: {factory.create_shape('circle', 5).area()}")
    context.console.print(f"Rectangle area: {factory.create_shape('rectangle', 4, 6).area()}")
    try:
        factory.create_shape("triangle", 3, 4)
    except UnknownProductTypeError as e:
        context.console.error(str(e))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)
