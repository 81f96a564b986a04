"""Coercion helpers: accept anything convertible where a value type is expected.

Each helper takes the canonical type itself, a tuple, or a list of the right
arity, and raises ``TypeError`` for anything else (including a vector of the
wrong kind).
"""

from __future__ import annotations

from typing import Any, Union

from .bounds import Bounds2D
from .offset import Offset2D
from .point import Point2D
from .size import Size2D

PointLike = Union[Point2D[Any], "tuple[Any, Any]", "list[Any]"]
OffsetLike = Union[Offset2D[Any], "tuple[Any, Any]", "list[Any]"]
SizeLike = Union[Size2D[Any], "tuple[Any, Any]", "list[Any]"]
BoundsLike = Union[Bounds2D[Any], "tuple[Any, Any, Any, Any]", "list[Any]"]


def to_point(value: PointLike) -> Point2D[Any]:
    return Point2D.convert(value)


def to_offset(value: OffsetLike) -> Offset2D[Any]:
    return Offset2D.convert(value)


def to_size(value: SizeLike) -> Size2D[Any]:
    return Size2D.convert(value)


def to_bounds(value: BoundsLike) -> Bounds2D[Any]:
    return Bounds2D.convert(value)


__all__ = [
    "BoundsLike",
    "OffsetLike",
    "PointLike",
    "SizeLike",
    "to_bounds",
    "to_offset",
    "to_point",
    "to_size",
]
