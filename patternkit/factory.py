"""A factory that creates shapes from preset dimensions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

__all__ = ["ShapeKind", "Shape", "Circle", "Rect", "ShapeFactory"]

PI = 3.14


class ShapeKind(Enum):
    """The kinds of shape the factory can make."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


class Shape(ABC):
    """A plane shape."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


class Circle(Shape):
    """A circle with a given radius."""

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return PI * self.radius * self.radius


class Rect(Shape):
    """A rectangle with a length and a breadth."""

    def __init__(self, length: float, breadth: float) -> None:
        self.length = length
        self.breadth = breadth

    def area(self) -> float:
        return self.length * self.breadth


class ShapeFactory:
    """Creates shapes using the dimensions it was configured with."""

    def __init__(self, radius: float, length: float, breadth: float) -> None:
        self.radius = radius
        self.length = length
        self.breadth = breadth

    def create_shape(self, kind: ShapeKind) -> Shape:
        """Return a new shape of the given kind."""
        if kind is ShapeKind.CIRCLE:
            return Circle(self.radius)
        if kind is ShapeKind.RECTANGLE:
            return Rect(self.length, self.breadth)
        raise ValueError(f"unknown shape kind: {kind!r}")