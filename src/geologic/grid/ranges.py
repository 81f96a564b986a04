"""Translate a rectangular region into per-row spans of a flat buffer."""

from __future__ import annotations

from typing import Iterator, Sequence, overload

from geologic.geometry import BoundsLike, to_bounds

from .validation import ensure_positive_area


class RowRanges(Sequence[range]):
    """Lazy, restartable sequence of half-open buffer spans, one per region row.

    Row ``r`` covers ``[start + r * stride, start + r * stride + row_width)``
    where ``start`` is the buffer index of the region's top-left element and
    ``stride`` is the length of a full grid row. Spans are only contiguous
    with each other when the region is as wide as the grid.
    """

    __slots__ = ("start", "stride", "row_width", "rows")

    def __init__(self, start: int, stride: int, row_width: int, rows: int) -> None:
        self.start = start
        self.stride = stride
        self.row_width = row_width
        self.rows = rows

    def __len__(self) -> int:
        return self.rows

    @overload
    def __getitem__(self, index: int) -> range:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[range]:
        ...

    def __getitem__(self, index: int | slice) -> range | list[range]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self.rows))]
        if index < 0:
            index += self.rows
        if not 0 <= index < self.rows:
            raise IndexError(f"Row {index} outside region of {self.rows} rows")
        first = self.start + index * self.stride
        return range(first, first + self.row_width)

    def __iter__(self) -> Iterator[range]:
        first = self.start
        for _ in range(self.rows):
            yield range(first, first + self.row_width)
            first += self.stride

    @property
    def element_count(self) -> int:
        return self.rows * self.row_width

    def __repr__(self) -> str:
        return (
            f"RowRanges(start={self.start}, stride={self.stride}, "
            f"row_width={self.row_width}, rows={self.rows})"
        )


def row_ranges(bounds: BoundsLike, grid_width: int, chunk_size: int) -> RowRanges:
    """Spans covering ``bounds`` (in cells) of a grid ``grid_width`` cells wide.

    Only the area is checked here; whether the region fits inside a grid is
    the grid's concern, since the height is not known at this level.
    """

    region = to_bounds(bounds)
    ensure_positive_area(region)

    x, y, width, height = region.to_tuple()
    full_width = grid_width * chunk_size
    first = x * chunk_size + y * full_width
    return RowRanges(first, full_width, width * chunk_size, height)


__all__ = ["RowRanges", "row_ranges"]
