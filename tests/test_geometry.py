import pytest

from geologic.geometry import (
    Bounds2D,
    Offset2D,
    Point2D,
    Size2D,
    to_bounds,
    to_offset,
    to_point,
    to_size,
)


def test_point_translates_by_offset() -> None:
    moved = Point2D(1, 2) + Offset2D(3, 4)

    assert moved == Point2D(4, 6)
    assert isinstance(moved, Point2D)


def test_point_difference_is_offset() -> None:
    delta = Point2D(5, 7) - Point2D(2, 3)

    assert delta == Offset2D(3, 4)
    assert Point2D(2, 3).offset_to((5, 7)) == delta


def test_kinds_do_not_compare_equal() -> None:
    assert Point2D(1, 2) != Offset2D(1, 2)
    assert Size2D(1, 2) != Point2D(1, 2)
    assert Point2D(1, 2) == Point2D(1, 2)


def test_size_rejects_other_kinds_in_arithmetic() -> None:
    with pytest.raises(TypeError):
        Size2D(1, 1) + Point2D(1, 1)


def test_componentwise_arithmetic_and_scalars() -> None:
    offset = Offset2D(2, 3)

    assert offset * 2 == Offset2D(4, 6)
    assert 2 * offset == Offset2D(4, 6)
    assert offset * (2, 5) == Offset2D(4, 15)
    assert Offset2D(8, 6) / 2 == Offset2D(4.0, 3.0)
    assert Offset2D(7, 5) // 2 == Offset2D(3, 2)
    assert -offset == Offset2D(-2, -3)
    assert offset - (1, 1) == Offset2D(1, 2)


def test_dot_and_cross() -> None:
    point = Point2D(1, 2)

    assert point.dot((3, 4)) == 11
    assert point.cross(Point2D(3, 4)) == -2


def test_grow_shrink_and_cast() -> None:
    size = Size2D(4, 10)

    assert size.grow((6, 2)) == Size2D(6, 10)
    assert size.shrink((6, 2)) == Size2D(4, 2)
    assert Point2D(1.9, -2.7).cast(int) == Point2D(1, -2)
    assert Size2D.splat(3) == Size2D.square(3)


def test_size_accessors() -> None:
    size = Size2D(3, 4)

    assert (size.width, size.height, size.area) == (3, 4, 12)
    assert repr(size) == "Size2D(width=3, height=4)"


def test_conversion_helpers_accept_tuples_and_lists() -> None:
    assert to_point((1, 2)) == Point2D(1, 2)
    assert to_offset([1, 2]) == Offset2D(1, 2)
    assert to_size(Size2D(1, 2)) == Size2D(1, 2)
    assert to_bounds((0, 1, 2, 3)) == Bounds2D.new(0, 1, 2, 3)
    assert to_bounds([0, 1, 2, 3]) == Bounds2D.new(0, 1, 2, 3)


@pytest.mark.parametrize("value", [(1, 2, 3), [1], "ab", 5, Offset2D(1, 2)])
def test_to_point_rejects_unconvertible_values(value: object) -> None:
    with pytest.raises(TypeError):
        to_point(value)  # type: ignore[arg-type]


def test_to_bounds_rejects_wrong_arity() -> None:
    with pytest.raises(TypeError):
        to_bounds((1, 2, 3))


def test_vectors_unpack_like_tuples() -> None:
    x, y = Point2D(3, 4)

    assert (x, y) == (3, 4)
    assert Point2D(3, 4).to_tuple() == (3, 4)


def test_values_are_immutable() -> None:
    point = Point2D(1, 2)

    with pytest.raises(AttributeError):
        point.x = 5  # type: ignore[misc]


def test_bounds_edges() -> None:
    bounds = Bounds2D.new(2, 3, 4, 5)

    assert (bounds.left, bounds.top, bounds.right, bounds.bottom) == (2, 3, 6, 8)
    assert (bounds.width, bounds.height, bounds.area) == (4, 5, 20)
    assert tuple(bounds) == (2, 3, 4, 5)


def test_bounds_from_parts_coerces_components() -> None:
    bounds = Bounds2D.from_parts((1, 2), [3, 4])

    assert bounds.position == Point2D(1, 2)
    assert bounds.size == Size2D(3, 4)
    assert Bounds2D((1, 2), (3, 4)) == bounds


def test_bounds_expand_shrink_move() -> None:
    bounds = Bounds2D.new(1, 1, 4, 4)

    assert bounds.expand((6, 2)) == Bounds2D.new(1, 1, 6, 4)
    assert bounds.shrink((6, 2)) == Bounds2D.new(1, 1, 4, 2)
    assert bounds.move_to((0, 9)) == Bounds2D.new(0, 9, 4, 4)
    assert bounds.resize(Size2D(1, 1)) == Bounds2D.new(1, 1, 1, 1)
    assert Bounds2D.splat(10) == Bounds2D.new(10, 10, 10, 10)


def test_bounds_operators() -> None:
    bounds = Point2D(0, 40).with_size(Size2D.square(5))

    moved = bounds + Offset2D(3, 5)
    assert moved == Bounds2D.new(3, 45, 5, 5)

    enlarged = moved + Size2D(10, 10)
    assert enlarged == Bounds2D.new(3, 45, 15, 15)

    assert bounds + (10, 20) == Bounds2D.new(10, 60, 5, 5)
    assert moved - Offset2D(3, 5) == bounds
    assert enlarged - Size2D(10, 10) == moved


def test_bounds_contains() -> None:
    outer = Bounds2D.new(0, 0, 3, 3)

    assert outer.contains((1, 1, 2, 2))
    assert not outer.contains((2, 2, 2, 1))
    assert outer.contains(Point2D(2, 2))
    assert not outer.contains((3, 0))
