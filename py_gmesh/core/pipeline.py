"""
Pipeline driver: populate, mesh, analyze adjacency, color.

All state of a pass (grid, mesh, adjacency, coloring) is owned by a
MeshingPipeline instance. A resize or pattern change discards it and
starts from a fresh grid; a run meshes whatever the grid currently holds.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np
import structlog

from ..config import Settings, settings as default_settings
from ..utils.random import create_rng
from .adjacency import build_adjacency, edge_count
from .coloring import RGB, ColorAssignment, color as color_quads
from .grid import OccupancyGrid
from .mesher import MeshResult, Quad, greedy_mesh
from .populator import PatternType, populate as populate_grid

logger = structlog.get_logger()


@dataclass
class PipelineResult:
    """Output of one meshing pass."""

    side_length: int
    pattern: str
    mesh: MeshResult
    adjacency: List[List[int]] = field(default_factory=list)
    coloring: ColorAssignment = field(default_factory=ColorAssignment)

    @property
    def quads(self) -> List[Quad]:
        return self.mesh.quads

    @property
    def edge_count(self) -> int:
        return edge_count(self.adjacency)

    def colored_quads(self) -> Iterator[Tuple[Quad, RGB]]:
        """(quad, display color) pairs for the renderer."""
        for i, quad in enumerate(self.mesh.quads):
            yield quad, self.coloring.color_of(i)


def _pattern_name(pattern: Union[PatternType, str]) -> str:
    return pattern.value if isinstance(pattern, PatternType) else str(pattern)


class MeshingPipeline:
    """
    Runs greedy meshing passes over a square occupancy grid.

    The side length is checked against the configured shell bounds. The
    core itself accepts any positive side length through populate().
    """

    def __init__(
        self,
        side_length: Optional[int] = None,
        pattern: Union[PatternType, str, None] = None,
        seed: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.seed = seed if seed is not None else self.settings.seed
        self.side_length = self.settings.default_side_length
        self.pattern: Union[PatternType, str] = self.settings.default_pattern
        self.grid: Optional[OccupancyGrid] = None
        self.rng: Optional[np.random.Generator] = None
        self.last_result: Optional[PipelineResult] = None
        self.reset(side_length, pattern)

    def reset(
        self,
        side_length: Optional[int] = None,
        pattern: Union[PatternType, str, None] = None,
    ) -> OccupancyGrid:
        """
        Discard the current grid and populate a fresh one.

        last_result keeps the output of the previous successful pass until
        the next run completes.

        Args:
            side_length: New side length, keeps the current one if None
            pattern: New pattern, keeps the current one if None

        Returns:
            The populated grid
        """
        self.side_length = self.settings.check_side_length(
            side_length if side_length is not None else self.side_length
        )
        if pattern is not None:
            self.pattern = pattern

        self.rng = create_rng(self.seed)
        self.grid = populate_grid(OccupancyGrid(self.side_length), self.pattern, self.rng)
        logger.info(
            "Grid reset",
            side_length=self.side_length,
            pattern=_pattern_name(self.pattern),
            occupied=self.grid.occupied_count(),
        )
        return self.grid

    def run(self) -> PipelineResult:
        """
        Mesh the current grid and color the result.

        The grid is drained by the pass. If any stage fails the previous
        result stays in last_result and the error propagates.
        """
        mesh_result = greedy_mesh(self.grid)
        adjacency = build_adjacency(mesh_result.quads)
        coloring = color_quads(mesh_result.quads, self.rng, adj=adjacency)

        result = PipelineResult(
            side_length=self.side_length,
            pattern=_pattern_name(self.pattern),
            mesh=mesh_result,
            adjacency=adjacency,
            coloring=coloring,
        )
        self.last_result = result
        logger.info(
            "Meshing pass complete",
            quad_count=mesh_result.quad_count,
            edge_count=result.edge_count,
            color_count=coloring.color_count,
        )
        return result


def populate(
    side_length: int,
    pattern: Union[PatternType, str] = PatternType.TRIANGULAR,
    seed: Optional[str] = None,
) -> OccupancyGrid:
    """Create and populate a grid of the given side length."""
    return populate_grid(OccupancyGrid(side_length), pattern, create_rng(seed))


def mesh(grid: OccupancyGrid) -> MeshResult:
    """Greedy-mesh a grid; the grid is drained."""
    return greedy_mesh(grid)


def color(quads: List[Quad], rng: Optional[np.random.Generator] = None) -> ColorAssignment:
    """Color quads so adjacent ones differ."""
    return color_quads(quads, rng)
