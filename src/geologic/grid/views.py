"""Windows onto a grid buffer that do not copy it."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, overload

from .buffers import CellBuffer
from .ranges import RowRanges


class RowView(Sequence[Any]):
    """Mutable, fixed-length window onto one span of a buffer.

    Index ``0`` is the first element of the span. Writes go straight to the
    underlying buffer; indices outside the span raise ``IndexError`` so a
    mutator can never reach a neighbouring row.
    """

    __slots__ = ("_buffer", "_span")

    def __init__(self, buffer: CellBuffer[Any], span: range) -> None:
        self._buffer = buffer
        self._span = span

    @property
    def span(self) -> range:
        return self._span

    def __len__(self) -> int:
        return len(self._span)

    def _absolute(self, index: int) -> int:
        try:
            return self._span[index]
        except IndexError:
            raise IndexError(
                f"Index {index} outside row of {len(self._span)} elements"
            ) from None

    @overload
    def __getitem__(self, index: int) -> Any:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]:
        ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self._buffer[i] for i in self._span[index]]
        return self._buffer[self._absolute(index)]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            targets = self._span[index]
            values = list(value)
            if len(values) != len(targets):
                raise ValueError(
                    f"Cannot assign {len(values)} values to {len(targets)} elements of a row"
                )
            if targets.step == 1:
                self._buffer.write(targets, values)
                return
            # strided slices are written one by one; undo them if one fails
            previous = [self._buffer[target] for target in targets]
            written: list[int] = []
            try:
                for target, item in zip(targets, values):
                    self._buffer[target] = item
                    written.append(target)
            except Exception:
                for target, item in zip(written, previous):
                    self._buffer[target] = item
                raise
            return
        self._buffer[self._absolute(index)] = value

    def __iter__(self) -> Iterator[Any]:
        for i in self._span:
            yield self._buffer[i]

    def fill(self, value: Any) -> None:
        for i in self._span:
            self._buffer[i] = value

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the whole row with ``values`` (must match its length)."""

        self._buffer.write(self._span, list(values))

    def tolist(self) -> list[Any]:
        return self._buffer.read(self._span)

    def __repr__(self) -> str:
        return f"RowView({self.tolist()!r})"


class RegionView(Sequence[Any]):
    """Read-only, zero-copy concatenation of a region's rows.

    Reads through to the grid buffer, so it reflects later writes; it is only
    meaningful while the grid keeps its layout.
    """

    __slots__ = ("_buffer", "_ranges")

    def __init__(self, buffer: CellBuffer[Any], ranges: RowRanges) -> None:
        self._buffer = buffer
        self._ranges = ranges

    def __len__(self) -> int:
        return self._ranges.element_count

    def _absolute(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"Index {index} outside region of {size} elements")
        row, column = divmod(index, self._ranges.row_width)
        return self._ranges[row][column]

    @overload
    def __getitem__(self, index: int) -> Any:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]:
        ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        return self._buffer[self._absolute(index)]

    def __iter__(self) -> Iterator[Any]:
        for span in self._ranges:
            for i in span:
                yield self._buffer[i]

    def rows(self) -> Iterator[RowView]:
        for span in self._ranges:
            yield RowView(self._buffer, span)

    def tolist(self) -> list[Any]:
        return list(self)

    def __repr__(self) -> str:
        return f"RegionView({self.tolist()!r})"


__all__ = ["RegionView", "RowView"]
