import pytest

from patternkit.factory import Circle, Rect, Shape, ShapeFactory, ShapeKind


def test_circle_uses_configured_radius():
    shape = ShapeFactory(5, 5, 15).create_shape(ShapeKind.CIRCLE)
    assert isinstance(shape, Circle)
    assert shape.radius == 5


def test_rectangle_uses_configured_sides():
    shape = ShapeFactory(5, 5, 15).create_shape(ShapeKind.RECTANGLE)
    assert isinstance(shape, Rect)
    assert (shape.length, shape.breadth) == (5, 15)
    assert shape.area() == 75


def test_unit_circle_area():
    shape = ShapeFactory(1, 1, 1).create_shape(ShapeKind.CIRCLE)
    assert shape.area() == pytest.approx(3.14)


def test_each_call_makes_a_new_shape():
    factory = ShapeFactory(1, 2, 3)
    first = factory.create_shape(ShapeKind.CIRCLE)
    second = factory.create_shape(ShapeKind.CIRCLE)
    assert first is not second
    assert first.area() == second.area()


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        ShapeFactory(1, 1, 1).create_shape("triangle")


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()