"""Shapes that accept visitors which report on them."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["ShapeVisitor", "Shape", "Circle", "Rect", "AreaVisitor", "CsvVisitor"]

PI = 3.14


def _fmt(value: float) -> str:
    """Format a number with six significant digits and no trailing zeros."""
    return f"{value:g}"


class ShapeVisitor(ABC):
    """An operation that can be applied to every kind of shape."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> object:
        """Handle a circle."""

    @abstractmethod
    def visit_rect(self, rect: Rect) -> object:
        """Handle a rectangle."""


class Shape(ABC):
    """A plane shape."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> object:
        """Dispatch to the visitor method for this shape's kind."""


class Circle(Shape):
    """A circle with a given radius."""

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return PI * self.radius * self.radius

    def accept(self, visitor: ShapeVisitor) -> object:
        return visitor.visit_circle(self)


class Rect(Shape):
    """A rectangle with a length and a breadth."""

    def __init__(self, length: float, breadth: float) -> None:
        self.length = length
        self.breadth = breadth

    def area(self) -> float:
        return self.length * self.breadth

    def accept(self, visitor: ShapeVisitor) -> object:
        return visitor.visit_rect(self)


class AreaVisitor(ShapeVisitor):
    """Prints and returns a line giving each shape's area."""

    def visit_circle(self, circle: Circle) -> str:
        line = f"Circle, area:{_fmt(circle.area())}"
        print(line)
        return line

    def visit_rect(self, rect: Rect) -> str:
        line = f"Rectangle, area:{_fmt(rect.area())}"
        print(line)
        return line


class CsvVisitor(ShapeVisitor):
    """Prints and returns a line giving each shape's dimensions."""

    def visit_circle(self, circle: Circle) -> str:
        line = f"Circle, radius:{_fmt(circle.radius)}"
        print(line)
        return line

    def visit_rect(self, rect: Rect) -> str:
        line = f"Rectangle, L:{_fmt(rect.length)} x B:{_fmt(rect.breadth)}"
        print(line)
        return line