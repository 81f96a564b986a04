"""Two-dimensional extents."""

from __future__ import annotations

from .vector import Number, Vector2D


class Size2D(Vector2D[Number]):
    """A width and a height.

    Stored in the ``x``/``y`` slots of ``Vector2D``; ``width`` and ``height``
    are the names callers should use.
    """

    __slots__ = ()

    @classmethod
    def square(cls, size: Number) -> "Size2D[Number]":
        return cls(size, size)

    @property
    def width(self) -> Number:
        return self.x

    @property
    def height(self) -> Number:
        return self.y

    @property
    def area(self) -> Number:
        return self.x * self.y

    def __repr__(self) -> str:
        return f"Size2D(width={self.x!r}, height={self.y!r})"


__all__ = ["Size2D"]
