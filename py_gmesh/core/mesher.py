"""
Greedy rectangle meshing of an occupancy grid.

The mesher scans rows top to bottom and columns left to right. Each
unconsumed occupied cell starts a quad: the horizontal run is extended as
far right as the row allows, then the run is extended downward while every
cell under it is occupied. The cells of the quad are cleared so they are
never matched twice.

This is a single forward pass without backtracking. It always yields a
partition of the occupied cells into rectangles, but not necessarily the
smallest one.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import structlog

from .grid import OccupancyGrid

logger = structlog.get_logger()


@dataclass(frozen=True)
class Quad:
    """Axis-aligned rectangle with inclusive corners (x0, y0) and (x1, y1)."""

    x0: int
    y0: int
    x1: int
    y1: int

    def __post_init__(self):
        assert self.x0 <= self.x1 and self.y0 <= self.y1, f"malformed quad {self}"

    @property
    def width(self) -> int:
        return self.x1 - self.x0 + 1

    @property
    def height(self) -> int:
        return self.y1 - self.y0 + 1

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate covered cells in row-major order."""
        for y in range(self.y0, self.y1 + 1):
            for x in range(self.x0, self.x1 + 1):
                yield x, y

    def __str__(self) -> str:
        return f"({self.x0},{self.y0})-({self.x1},{self.y1})"


@dataclass
class MeshResult:
    """Quads of one meshing pass, in scan order."""

    quads: List[Quad] = field(default_factory=list)
    total_cell_count: int = 0

    @property
    def quad_count(self) -> int:
        return len(self.quads)


def _row_span_occupied(grid: OccupancyGrid, left: int, right: int, y: int) -> bool:
    """True if every cell of [left, right) in row y is occupied."""
    return bool(grid.as_array()[y, left:right].all())


def greedy_mesh(grid: OccupancyGrid) -> MeshResult:
    """
    Consume the grid and return the quads covering its occupied cells.

    The grid is drained: every occupied cell is cleared by the time this
    returns, so meshing the same grid again yields an empty result.

    Args:
        grid: Occupancy grid, mutated in place

    Returns:
        MeshResult with quads in row-major scan order
    """
    s = grid.side_length
    result = MeshResult()

    for y in range(s):
        left = 0
        while left < s:
            if not grid.get(left, y):
                left += 1
                continue

            right = left + 1
            while right < s and grid.get(right, y):
                right += 1

            y_extend = y + 1
            while y_extend < s and _row_span_occupied(grid, left, right, y_extend):
                y_extend += 1

            for clear_y in range(y, y_extend):
                for clear_x in range(left, right):
                    grid.clear(clear_x, clear_y)

            quad = Quad(left, y, right - 1, y_extend - 1)
            result.quads.append(quad)
            result.total_cell_count += quad.cell_count

            left = right

    logger.info(
        "Greedy meshing done",
        total_cell_count=result.total_cell_count,
        quad_count=result.quad_count,
    )
    return result
