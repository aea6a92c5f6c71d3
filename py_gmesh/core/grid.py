"""Square boolean occupancy grid."""

from typing import Iterator, Sequence, Set, Tuple

import numpy as np


class OccupancyGrid:
    """
    Occupancy over an S x S lattice, stored as a flat row-major bool array.

    Cell (x, y) lives at offset y * S + x. Indices outside the lattice are
    programming errors and fail an assertion instead of wrapping around.
    """

    def __init__(self, side_length: int):
        assert isinstance(side_length, (int, np.integer)), "side_length must be an integer"
        assert side_length > 0, f"side_length must be positive, got {side_length}"
        self.side_length = int(side_length)
        self.cells = np.zeros(self.side_length * self.side_length, dtype=bool)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "OccupancyGrid":
        """Build a grid from S rows of S truthy/falsy values."""
        side_length = len(rows)
        grid = cls(side_length)
        for y, row in enumerate(rows):
            assert len(row) == side_length, f"row {y} has length {len(row)}, expected {side_length}"
            for x, value in enumerate(row):
                if value:
                    grid.set(x, y)
        return grid

    def _offset(self, x: int, y: int) -> int:
        s = self.side_length
        assert 0 <= x < s and 0 <= y < s, f"cell ({x}, {y}) outside {s}x{s} grid"
        return y * s + x

    def get(self, x: int, y: int) -> bool:
        return bool(self.cells[self._offset(x, y)])

    def set(self, x: int, y: int) -> None:
        self.cells[self._offset(x, y)] = True

    def clear(self, x: int, y: int) -> None:
        self.cells[self._offset(x, y)] = False

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def occupied_cells(self) -> Set[Tuple[int, int]]:
        """Set of (x, y) for every occupied cell."""
        return set(self.iter_occupied())

    def iter_occupied(self) -> Iterator[Tuple[int, int]]:
        s = self.side_length
        for offset in np.flatnonzero(self.cells):
            yield int(offset % s), int(offset // s)

    def is_empty(self) -> bool:
        return not self.cells.any()

    def as_array(self) -> np.ndarray:
        """2D (row, column) view of the cells."""
        return self.cells.reshape(self.side_length, self.side_length)

    def copy(self) -> "OccupancyGrid":
        clone = OccupancyGrid(self.side_length)
        clone.cells = self.cells.copy()
        return clone

    def __repr__(self) -> str:
        return f"OccupancyGrid(side_length={self.side_length}, occupied={self.occupied_count()})"
