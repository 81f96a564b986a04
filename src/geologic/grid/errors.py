"""Exceptions raised by the grid engine."""

from __future__ import annotations

from typing import Any, Optional


class GridError(RuntimeError):
    """Base class for every grid failure."""


class GridConstructionError(GridError):
    """Raised when a buffer cannot be laid out as ``width * chunk_size`` rows."""

    def __init__(
        self,
        message: str,
        *,
        length: int,
        width: int,
        chunk_size: int,
    ) -> None:
        super().__init__(message)
        self.length = length
        self.width = width
        self.chunk_size = chunk_size


class RegionBoundsError(GridError):
    """Raised when a region has no area or reaches outside the grid."""

    def __init__(
        self,
        message: str,
        *,
        bounds: Any = None,
        grid_size: Optional[tuple[int, int]] = None,
    ) -> None:
        super().__init__(message)
        self.bounds = bounds
        self.grid_size = grid_size


class DataShapeError(GridError):
    """Raised when insert data does not divide into the region's rows."""

    def __init__(self, *, row: int, expected_rows: int, supplied_rows: int) -> None:
        if supplied_rows < expected_rows:
            message = (
                f"Insert data ran out at row {row}: "
                f"expected {expected_rows} rows, got {supplied_rows}"
            )
        else:
            message = (
                f"Insert data has more than {expected_rows} rows "
                f"(surplus starts at row {row})"
            )
        super().__init__(message)
        self.row = row
        self.expected_rows = expected_rows
        self.supplied_rows = supplied_rows


__all__ = [
    "DataShapeError",
    "GridConstructionError",
    "GridError",
    "RegionBoundsError",
]
