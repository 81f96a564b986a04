"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator

from .offset import Offset2D
from .point import Point2D
from .size import Size2D
from .vector import Number


@dataclass(frozen=True, slots=True)
class Bounds2D(Generic[Number]):
    """A rectangle described by its top-left ``position`` and its ``size``.

    Also known as a rect. The value itself accepts any size, including empty
    or negative ones; consumers that need a positive area check it at the
    point of use.
    """

    position: Point2D[Number]
    size: Size2D[Number]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Point2D.convert(self.position))
        object.__setattr__(self, "size", Size2D.convert(self.size))

    @classmethod
    def new(cls, x: Number, y: Number, width: Number, height: Number) -> "Bounds2D[Number]":
        return cls(Point2D(x, y), Size2D(width, height))

    @classmethod
    def from_parts(cls, position: object, size: object) -> "Bounds2D[Any]":
        return cls(Point2D.convert(position), Size2D.convert(size))

    @classmethod
    def splat(cls, value: Number) -> "Bounds2D[Number]":
        return cls(Point2D.splat(value), Size2D.splat(value))

    @classmethod
    def convert(cls, value: object) -> "Bounds2D[Any]":
        """Coerce a ``Bounds2D`` or an ``(x, y, width, height)`` tuple/list."""

        if isinstance(value, cls):
            return value
        if isinstance(value, (tuple, list)):
            if len(value) != 4:
                raise TypeError(
                    f"Bounds2D needs exactly 4 components, got {len(value)}"
                )
            x, y, width, height = value
            return cls.new(x, y, width, height)
        raise TypeError(f"Cannot convert {type(value).__name__} to Bounds2D")

    @property
    def x(self) -> Number:
        return self.position.x

    @property
    def y(self) -> Number:
        return self.position.y

    @property
    def width(self) -> Number:
        return self.size.width

    @property
    def height(self) -> Number:
        return self.size.height

    @property
    def area(self) -> Number:
        return self.size.area

    @property
    def left(self) -> Number:
        return self.position.x

    @property
    def top(self) -> Number:
        return self.position.y

    @property
    def right(self) -> Number:
        return self.position.x + self.size.width

    @property
    def bottom(self) -> Number:
        return self.position.y + self.size.height

    def to_tuple(self) -> tuple[Number, Number, Number, Number]:
        return (self.position.x, self.position.y, self.size.width, self.size.height)

    def __iter__(self) -> Iterator[Number]:
        return iter(self.to_tuple())

    def expand(self, size: object) -> "Bounds2D[Number]":
        """Keep the position; grow each dimension to at least ``size``."""

        return Bounds2D(self.position, self.size.grow(Size2D.convert(size)))

    def shrink(self, size: object) -> "Bounds2D[Number]":
        """Keep the position; clamp each dimension to at most ``size``."""

        return Bounds2D(self.position, self.size.shrink(Size2D.convert(size)))

    def move_to(self, point: object) -> "Bounds2D[Number]":
        return Bounds2D(Point2D.convert(point), self.size)

    def translate(self, offset: object) -> "Bounds2D[Number]":
        return Bounds2D(self.position + Offset2D.convert(offset), self.size)

    def resize(self, size: object) -> "Bounds2D[Number]":
        return Bounds2D(self.position, Size2D.convert(size))

    def contains(self, other: object) -> bool:
        """True when ``other`` (bounds or point) lies entirely inside."""

        if isinstance(other, Point2D) or (
            isinstance(other, (tuple, list)) and len(other) == 2
        ):
            point = Point2D.convert(other)
            return self.left <= point.x < self.right and self.top <= point.y < self.bottom

        inner = Bounds2D.convert(other)
        return (
            self.left <= inner.left
            and self.top <= inner.top
            and inner.right <= self.right
            and inner.bottom <= self.bottom
        )

    def __add__(self, other: object) -> "Bounds2D[Number]":
        if isinstance(other, Size2D):
            return Bounds2D(self.position, self.size + other)
        if isinstance(other, (Offset2D, tuple, list)):
            return self.translate(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Bounds2D[Number]":
        if isinstance(other, Size2D):
            return Bounds2D(self.position, self.size - other)
        if isinstance(other, (Offset2D, tuple, list)):
            return self.translate(-Offset2D.convert(other))
        return NotImplemented


__all__ = ["Bounds2D"]
