"""Geometric value types: points, offsets, sizes and bounding boxes."""

from .bounds import Bounds2D
from .convert import (
    BoundsLike,
    OffsetLike,
    PointLike,
    SizeLike,
    to_bounds,
    to_offset,
    to_point,
    to_size,
)
from .offset import Offset2D
from .point import Point2D
from .size import Size2D
from .vector import Number, Vector2D

__all__ = [
    "Bounds2D",
    "BoundsLike",
    "Number",
    "Offset2D",
    "OffsetLike",
    "Point2D",
    "PointLike",
    "Size2D",
    "SizeLike",
    "Vector2D",
    "to_bounds",
    "to_offset",
    "to_point",
    "to_size",
]
