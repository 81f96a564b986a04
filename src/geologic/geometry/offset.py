"""Offsets: vectors used as translations or velocities."""

from __future__ import annotations

from .vector import Number, Vector2D


class Offset2D(Vector2D[Number]):
    """A two-dimensional translation.

    ``Point2D + Offset2D`` moves a point, ``Bounds2D + Offset2D`` moves a
    rectangle, and offsets scale by plain numbers.
    """

    __slots__ = ()

    @classmethod
    def zero(cls) -> "Offset2D[int]":
        return cls(0, 0)


__all__ = ["Offset2D"]
