"""Linear cell storage backing a grid.

A grid only needs an owned, indexable, fixed-length sequence. Two
implementations are provided: ``DynamicBuffer`` keeps arbitrary Python
objects in a list, ``FixedBuffer`` packs numbers into a typed
``array.array`` (one machine value per element, like a C array).
"""

from __future__ import annotations

from array import array
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    MutableSequence,
    Protocol,
    Sequence,
    TypeVar,
    overload,
    runtime_checkable,
)

E = TypeVar("E")


@runtime_checkable
class CellBuffer(Protocol[E]):
    """Capability the grid requires from its storage."""

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[E]:
        ...

    def __getitem__(self, index: int) -> E:
        ...

    def __setitem__(self, index: int, value: E) -> None:
        ...

    def read(self, span: range) -> list[E]:
        """Copy the elements in ``span`` out of the buffer."""
        ...

    def write(self, span: range, values: Sequence[E]) -> None:
        """Overwrite ``span`` with exactly ``len(span)`` values."""
        ...


class _LinearBuffer(Generic[E]):
    __slots__ = ("_data",)

    _data: MutableSequence[E]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[E]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> E:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[E]:
        ...

    def __getitem__(self, index: int | slice) -> E | list[E]:
        if isinstance(index, slice):
            return list(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: E) -> None:
        if isinstance(index, slice):
            raise TypeError("Use write() to replace a span of a fixed-length buffer")
        self._data[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _LinearBuffer):
            return list(self._data) == list(other._data)
        return NotImplemented

    def read(self, span: range) -> list[E]:
        return list(self._data[span.start : span.stop])

    def write(self, span: range, values: Sequence[E]) -> None:
        if len(values) != len(span):
            raise ValueError(
                f"Span of {len(span)} elements cannot take {len(values)} values"
            )
        self._data[span.start : span.stop] = self._coerce(values)

    def tolist(self) -> list[E]:
        return list(self._data)

    def _coerce(self, values: Sequence[E]) -> Any:
        return list(values)


class DynamicBuffer(_LinearBuffer[E]):
    """List-backed storage for any element type."""

    __slots__ = ()

    def __init__(self, values: Iterable[E] = ()) -> None:
        self._data = list(values)

    @classmethod
    def filled(cls, default: E, length: int) -> "DynamicBuffer[E]":
        return cls([default] * length)

    def __repr__(self) -> str:
        return f"DynamicBuffer({self._data!r})"


class FixedBuffer(_LinearBuffer[Any]):
    """Typed numeric storage on top of ``array.array``.

    ``typecode`` follows the ``array`` module (``"B"`` for bytes, ``"f"`` for
    32-bit floats, ...). Values outside the type's range raise
    ``OverflowError`` on write, as ``array`` does.
    """

    __slots__ = ("typecode",)

    def __init__(self, typecode: str, values: Iterable[Any] = ()) -> None:
        self.typecode = typecode
        self._data = array(typecode, values)

    @classmethod
    def filled(cls, typecode: str, default: Any, length: int) -> "FixedBuffer":
        return cls(typecode, [default] * length)

    def _coerce(self, values: Sequence[Any]) -> Any:
        return array(self.typecode, values)

    def __repr__(self) -> str:
        return f"FixedBuffer({self.typecode!r}, {self._data.tolist()!r})"


__all__ = ["CellBuffer", "DynamicBuffer", "FixedBuffer"]
