"""Points in 2D space."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .offset import Offset2D
from .vector import Number, Vector2D

if TYPE_CHECKING:
    from .bounds import Bounds2D


class Point2D(Vector2D[Number]):
    """A position in 2D space.

    Points translate by offsets (or bare tuples, read as offsets), and the
    difference of two points is the ``Offset2D`` between them.
    """

    __slots__ = ()

    @classmethod
    def origin(cls) -> "Point2D[int]":
        return cls(0, 0)

    def _operand(self, other: object) -> Vector2D[Any] | None:
        if isinstance(other, Offset2D):
            return other
        return super(Point2D, self)._operand(other)

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Point2D):
            return Offset2D(self.x - other.x, self.y - other.y)
        return super(Point2D, self).__sub__(other)

    def offset_to(self, other: object) -> Offset2D[Number]:
        target = Point2D.convert(other)
        return Offset2D(target.x - self.x, target.y - self.y)

    def with_size(self, size: object) -> "Bounds2D[Number]":
        """Rectangle anchored at this point."""

        from .bounds import Bounds2D

        return Bounds2D.from_parts(self, size)


__all__ = ["Point2D"]
