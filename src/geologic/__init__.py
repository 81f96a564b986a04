"""Geometric value types and a flat-buffer 2D grid addressing engine.

Example::

    from geologic import Bounds2D, Grid2D, Offset2D, Point2D, Size2D

    bounds = Point2D(0, 40).with_size(Size2D.square(5))
    moved = bounds + Offset2D(3, 5)          # Bounds2D.new(3, 45, 5, 5)

    grid = Grid2D.filled(0, 3, chunk_size=2)  # 3x3 cells, 2 elements each
    grid.insert((1, 1, 1, 2), [1, 2, 3, 4])
    grid.portion((1, 1, 1, 2))               # [1, 2, 3, 4]
"""

from .geometry import (
    Bounds2D,
    Offset2D,
    Point2D,
    Size2D,
    Vector2D,
    to_bounds,
    to_offset,
    to_point,
    to_size,
)
from .grid import (
    CellBuffer,
    DataShapeError,
    DynamicBuffer,
    FixedBuffer,
    Grid2D,
    GridConstructionError,
    GridError,
    RegionBoundsError,
    RegionView,
    RowRanges,
    RowView,
    row_ranges,
)

__all__ = [
    "Bounds2D",
    "CellBuffer",
    "DataShapeError",
    "DynamicBuffer",
    "FixedBuffer",
    "Grid2D",
    "GridConstructionError",
    "GridError",
    "Offset2D",
    "Point2D",
    "RegionBoundsError",
    "RegionView",
    "RowRanges",
    "RowView",
    "Size2D",
    "Vector2D",
    "row_ranges",
    "to_bounds",
    "to_offset",
    "to_point",
    "to_size",
]

__version__ = "0.1.0"
