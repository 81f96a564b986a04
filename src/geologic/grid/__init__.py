"""Grid addressing engine: flat buffers viewed as rows of fixed-width cells."""

from .buffers import CellBuffer, DynamicBuffer, FixedBuffer
from .errors import DataShapeError, GridConstructionError, GridError, RegionBoundsError
from .grid import Grid2D, RowMutator
from .ranges import RowRanges, row_ranges
from .validation import ensure_positive_area, ensure_region
from .views import RegionView, RowView

__all__ = [
    "CellBuffer",
    "DataShapeError",
    "DynamicBuffer",
    "FixedBuffer",
    "Grid2D",
    "GridConstructionError",
    "GridError",
    "RegionBoundsError",
    "RegionView",
    "RowMutator",
    "RowRanges",
    "RowView",
    "ensure_positive_area",
    "ensure_region",
    "row_ranges",
]
