import pytest

from geologic.geometry import Bounds2D
from geologic.grid import Grid2D, RegionBoundsError, RowRanges, row_ranges


def test_row_ranges_single_element_cells() -> None:
    # 0, 1, 2
    # 3, X, 5
    # 6, X, 8
    ranges = row_ranges(Bounds2D.new(1, 1, 1, 2), 3, 1)

    assert list(ranges) == [range(4, 5), range(7, 8)]


def test_row_ranges_chunked_cells() -> None:
    # 0-1,   2-3,  4-5
    # 6-7,   X,    10-11
    # 12-13, X,    16-17
    ranges = row_ranges((1, 1, 1, 2), 3, 2)

    assert list(ranges) == [range(8, 10), range(14, 16)]


def test_row_ranges_are_restartable() -> None:
    ranges = row_ranges((0, 0, 2, 3), 4, 1)

    assert list(ranges) == list(ranges)
    assert ranges[1] == range(4, 6)
    assert ranges[-1] == range(8, 10)
    assert ranges[0:2] == [range(0, 2), range(4, 6)]
    assert len(ranges) == 3


def test_row_ranges_index_out_of_range() -> None:
    ranges = row_ranges((0, 0, 1, 1), 2, 1)

    with pytest.raises(IndexError):
        ranges[1]


@pytest.mark.parametrize(
    "bounds, width, chunk_size",
    [
        ((0, 0, 3, 3), 3, 1),
        ((1, 0, 2, 2), 4, 3),
        ((2, 1, 1, 3), 5, 4),
        ((0, 2, 5, 1), 5, 2),
    ],
)
def test_row_ranges_disjoint_and_sized(bounds, width, chunk_size) -> None:
    ranges = row_ranges(bounds, width, chunk_size)
    region = Bounds2D.convert(bounds)

    assert len(ranges) == region.height
    assert all(len(span) == region.width * chunk_size for span in ranges)
    seen: set[int] = set()
    for span in ranges:
        assert seen.isdisjoint(span)
        seen.update(span)
    assert len(seen) == ranges.element_count


def test_row_ranges_gap_between_rows_of_narrow_region() -> None:
    first, second = row_ranges((0, 0, 2, 2), 3, 1)

    assert first.stop < second.start


@pytest.mark.parametrize("bounds", [(0, 0, 0, 2), (0, 0, 2, 0), (1, 1, -1, 1)])
def test_row_ranges_require_positive_area(bounds) -> None:
    with pytest.raises(RegionBoundsError):
        row_ranges(bounds, 3, 1)


def test_grid_row_ranges_check_bounds() -> None:
    grid = Grid2D.filled(0, 3)

    assert isinstance(grid.row_ranges((0, 0, 3, 3)), RowRanges)
    with pytest.raises(RegionBoundsError) as info:
        grid.row_ranges((2, 0, 2, 1))

    assert info.value.grid_size == (3, 3)
    assert info.value.bounds == Bounds2D.new(2, 0, 2, 1)


OPERATIONS = {
    "portion": lambda grid, bounds: grid.portion(bounds),
    "portion_view": lambda grid, bounds: grid.portion_view(bounds),
    "write": lambda grid, bounds: grid.write(bounds, lambda row, view: view.fill(1)),
    "insert": lambda grid, bounds: grid.insert(
        bounds, [1] * int(Bounds2D.convert(bounds).area * grid.chunk_size)
    ),
}


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
@pytest.mark.parametrize(
    "bounds",
    [(0, 2, 1, 2), (-1, 0, 1, 1), (0, -1, 1, 1), (3, 0, 1, 1), (0, 0, 4, 1)],
)
def test_grid_rejects_regions_outside(bounds, operation: str) -> None:
    grid = Grid2D.filled(0, 3, chunk_size=2)
    before = grid.values()

    with pytest.raises(RegionBoundsError):
        OPERATIONS[operation](grid, bounds)

    assert grid.values() == before


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
@pytest.mark.parametrize(
    "bounds", [(0.5, 0, 1, 1), (0, 0, 1.0, 1), (0, True, 1, 1), (0, 0, 1, 2.5)]
)
def test_grid_rejects_fractional_regions(bounds, operation: str) -> None:
    grid = Grid2D.filled(0, 3, chunk_size=2)

    with pytest.raises(RegionBoundsError):
        OPERATIONS[operation](grid, bounds)


def test_row_ranges_reject_fractional_regions() -> None:
    with pytest.raises(RegionBoundsError):
        row_ranges((0, 0.5, 1, 1), 3, 1)
