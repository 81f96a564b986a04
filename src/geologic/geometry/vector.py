"""Generic two-component vector shared by every geometric kind."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Generic, Iterator, TypeVar

Number = TypeVar("Number", int, float)
Cast = TypeVar("Cast", int, float)

VectorT = TypeVar("VectorT", bound="Vector2D[Any]")


@dataclass(frozen=True, slots=True)
class Vector2D(Generic[Number]):
    """A pair of numeric components.

    Subclasses act as kind tags: a ``Point2D`` and an ``Offset2D`` with the
    same components share a runtime layout but never compare equal, and
    arithmetic always returns the kind of the left operand. Prefer the
    concrete kinds over instantiating this class directly.
    """

    x: Number
    y: Number

    @classmethod
    def splat(cls: type[VectorT], value: Number) -> VectorT:
        return cls(value, value)

    @classmethod
    def convert(cls: type[VectorT], value: object) -> VectorT:
        """Coerce ``value`` into this kind.

        Accepts an instance of the kind itself or a two-item tuple/list.
        Vectors of another kind are rejected.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, Vector2D):
            raise TypeError(
                f"Expected {cls.__name__}, got {type(value).__name__}"
            )
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise TypeError(
                    f"{cls.__name__} needs exactly 2 components, got {len(value)}"
                )
            return cls(value[0], value[1])
        raise TypeError(f"Cannot convert {type(value).__name__} to {cls.__name__}")

    def _make(self: VectorT, x: Any, y: Any) -> VectorT:
        return type(self)(x, y)

    def _operand(self, other: object) -> Vector2D[Any] | None:
        try:
            return type(self).convert(other)
        except TypeError:
            return None

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[Number, Number]:
        return (self.x, self.y)

    def __add__(self: VectorT, other: object) -> VectorT:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self: VectorT, other: object) -> VectorT:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, Real):
            return self._make(self.x * other, self.y * other)
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.x * rhs.x, self.y * rhs.y)

    def __rmul__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, Real):
            return self._make(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, Real):
            return self._make(self.x / other, self.y / other)
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.x / rhs.x, self.y / rhs.y)

    def __floordiv__(self: VectorT, other: object) -> VectorT:
        if isinstance(other, Real):
            return self._make(self.x // other, self.y // other)
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self._make(self.x // rhs.x, self.y // rhs.y)

    def __neg__(self: VectorT) -> VectorT:
        return self._make(-self.x, -self.y)

    def dot(self, other: object) -> Number:
        rhs = type(self).convert(other)
        return self.x * rhs.x + self.y * rhs.y

    def cross(self, other: object) -> Number:
        """Z component of the 3D cross product with ``other``."""

        rhs = type(self).convert(other)
        return self.x * rhs.y - self.y * rhs.x

    def grow(self: VectorT, other: object) -> VectorT:
        """Component-wise maximum."""

        rhs = type(self).convert(other)
        return self._make(max(self.x, rhs.x), max(self.y, rhs.y))

    def shrink(self: VectorT, other: object) -> VectorT:
        """Component-wise minimum."""

        rhs = type(self).convert(other)
        return self._make(min(self.x, rhs.x), min(self.y, rhs.y))

    def cast(self: VectorT, numeric: Callable[[Any], Cast]) -> VectorT:
        """Convert both components with ``numeric`` (``int`` truncates)."""

        return self._make(numeric(self.x), numeric(self.y))


__all__ = ["Number", "Vector2D"]
