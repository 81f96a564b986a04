"""Flat-buffer 2D grid with region addressing."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from geologic.geometry import (
    Bounds2D,
    BoundsLike,
    PointLike,
    Size2D,
    SizeLike,
    to_bounds,
    to_point,
    to_size,
)
from geologic.runtime import telemetry

from .buffers import CellBuffer, DynamicBuffer, FixedBuffer
from .errors import DataShapeError, GridConstructionError
from .ranges import RowRanges, row_ranges
from .validation import ensure_region
from .views import RegionView, RowView

E = TypeVar("E")

RowMutator = Callable[[int, RowView], object]


class Grid2D(Generic[E]):
    """A 2D grid of cells stored row-major in one linear buffer.

    Every cell spans ``chunk_size`` consecutive buffer elements (4 for RGBA
    pixels, say), so a row of the grid is ``width * chunk_size`` elements
    long and the height follows from the buffer length. Regions are given as
    bounding boxes in cell coordinates and must lie inside the grid.

    The grid owns its buffer. Plain iterables are copied; a ``CellBuffer``
    instance is adopted as-is and should not be touched by the caller
    afterwards. The layout is fixed at construction.
    """

    def __init__(
        self,
        buffer: CellBuffer[E] | Iterable[E],
        width: int,
        chunk_size: int = 1,
        *,
        logger_name: str | None = None,
    ) -> None:
        self._logger_name = logger_name
        with telemetry.span(
            "grid::create",
            logger_name=logger_name,
            component="grid",
            metadata={"width": width, "chunk_size": chunk_size},
        ) as handle:
            storage: CellBuffer[E] = (
                buffer if isinstance(buffer, CellBuffer) else DynamicBuffer(buffer)
            )
            length = len(storage)
            handle.add_metadata("length", length)
            _check_layout(length, width, chunk_size)

            self._buffer = storage
            self._width = width
            self._chunk_size = chunk_size
            self._height = length // (width * chunk_size)

        telemetry.record_event(
            "grid.create",
            data={"size": (width, self._height), "chunk_size": chunk_size},
            logger_name=logger_name,
        )

    @classmethod
    def filled(
        cls,
        default: E,
        size: int | SizeLike,
        *,
        chunk_size: int = 1,
        typecode: Optional[str] = None,
        logger_name: str | None = None,
    ) -> "Grid2D[E]":
        """Grid of ``size`` cells (an int means square) set to ``default``.

        With ``typecode`` the cells live in a ``FixedBuffer`` of that
        ``array`` type instead of a list.
        """

        dimensions = Size2D.square(size) if isinstance(size, int) else to_size(size)
        if dimensions.width < 0 or dimensions.height < 0:
            raise GridConstructionError(
                f"Grid size must not be negative, got {dimensions.to_tuple()}",
                length=0,
                width=dimensions.width,
                chunk_size=chunk_size,
            )
        length = dimensions.area * max(chunk_size, 0)
        buffer: CellBuffer[Any]
        if typecode is not None:
            buffer = FixedBuffer.filled(typecode, default, length)
        else:
            buffer = DynamicBuffer.filled(default, length)
        return cls(buffer, dimensions.width, chunk_size, logger_name=logger_name)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def size(self) -> Size2D[int]:
        return Size2D(self._width, self._height)

    def bounds(self) -> Bounds2D[int]:
        """The region covering the whole grid."""

        return Bounds2D.new(0, 0, self._width, self._height)

    def __len__(self) -> int:
        return len(self._buffer)

    def values(self) -> tuple[E, ...]:
        """Snapshot of the entire buffer, row-major."""

        return tuple(self._buffer)

    def index(self, point: PointLike) -> int:
        """Buffer offset of the first element of the cell at ``point``.

        Not bounds checked.
        """

        cell = to_point(point)
        return cell.x * self._chunk_size + cell.y * self._width * self._chunk_size

    def row_ranges(self, bounds: BoundsLike) -> RowRanges:
        """Buffer spans of each row of ``bounds`` after checking it fits."""

        region = ensure_region(to_bounds(bounds), self._width, self._height)
        return row_ranges(region, self._width, self._chunk_size)

    def write(self, bounds: BoundsLike, mutator: RowMutator) -> None:
        """Call ``mutator(row, view)`` for each row of ``bounds``, top to bottom.

        ``row`` counts from 0 within the region and ``view`` is a mutable
        ``RowView`` limited to that row's cells.
        """

        region = to_bounds(bounds)
        with telemetry.span(
            "grid::write",
            logger_name=self._logger_name,
            component="grid",
            metadata={"bounds": region.to_tuple()},
        ):
            for row, cells in enumerate(self.row_ranges(region)):
                mutator(row, RowView(self._buffer, cells))

    def insert(self, bounds: BoundsLike, data: Iterable[E]) -> None:
        """Copy ``data`` row by row into ``bounds``.

        ``data`` must hold exactly ``width * chunk_size * height`` elements of
        the region; nothing is written if it does not.
        """

        region = to_bounds(bounds)
        with telemetry.span(
            "grid::insert",
            logger_name=self._logger_name,
            component="grid",
            metadata={"bounds": region.to_tuple()},
        ) as handle:
            ranges = self.row_ranges(region)
            values = list(data)
            handle.add_metadata("elements", len(values))
            _check_shape(len(values), ranges)

            step = ranges.row_width
            for row, cells in enumerate(ranges):
                start = row * step
                self._buffer.write(cells, values[start : start + step])

    def portion(self, bounds: BoundsLike) -> list[E]:
        """Copy of the elements of ``bounds``, rows concatenated in order."""

        region = to_bounds(bounds)
        with telemetry.span(
            "grid::portion",
            logger_name=self._logger_name,
            component="grid",
            metadata={"bounds": region.to_tuple()},
        ):
            result: list[E] = []
            for cells in self.row_ranges(region):
                result.extend(self._buffer.read(cells))
            return result

    def portion_view(self, bounds: BoundsLike) -> RegionView:
        """Like ``portion`` but reads through to the buffer instead of copying."""

        region = to_bounds(bounds)
        with telemetry.span(
            "grid::portion_view",
            logger_name=self._logger_name,
            component="grid",
            metadata={"bounds": region.to_tuple()},
        ):
            return RegionView(self._buffer, self.row_ranges(region))

    def __str__(self) -> str:
        values = [str(value) for value in self._buffer]
        step = self._chunk_size
        cells = [
            ", ".join(values[i : i + step]) + " | "
            for i in range(0, len(values), step)
        ]
        rows = "".join(
            "| " + "".join(cells[i : i + self._width]) + "\n"
            for i in range(0, len(cells), self._width)
        )
        return (
            f"Grid 2D ({self._width}x{self._height}; {self._chunk_size}):\n{rows}"
        )

    def __repr__(self) -> str:
        return (
            f"Grid2D(width={self._width}, height={self._height}, "
            f"chunk_size={self._chunk_size})"
        )


def _check_layout(length: int, width: int, chunk_size: int) -> None:
    if chunk_size < 1:
        raise GridConstructionError(
            f"Grid chunk size must be greater than zero. Got: {chunk_size}",
            length=length,
            width=width,
            chunk_size=chunk_size,
        )
    if width < 1:
        raise GridConstructionError(
            f"Grid width must be greater than zero. Got: {width}",
            length=length,
            width=width,
            chunk_size=chunk_size,
        )
    if length % (width * chunk_size):
        raise GridConstructionError(
            f"Buffer of {length} elements is not a whole number of rows "
            f"of {width} cells x {chunk_size} elements",
            length=length,
            width=width,
            chunk_size=chunk_size,
        )


def _check_shape(supplied: int, ranges: RowRanges) -> None:
    expected = ranges.element_count
    if supplied == expected:
        return
    rows = len(ranges)
    if supplied < expected:
        complete = supplied // ranges.row_width
        raise DataShapeError(row=complete, expected_rows=rows, supplied_rows=complete)
    raise DataShapeError(
        row=rows,
        expected_rows=rows,
        supplied_rows=-(-supplied // ranges.row_width),
    )


__all__ = ["Grid2D", "RowMutator"]
