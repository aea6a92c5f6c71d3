"""
Greedy first-fit coloring of the quad adjacency graph.

Quads are colored strictly in index order. Each quad takes the lowest
color id not already used by one of its colored neighbors, or a new id
when every existing id is taken. The result is valid (adjacent quads
differ) but not guaranteed to use the minimum number of colors.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np
import structlog

from .adjacency import build_adjacency
from .mesher import Quad
from ..utils.random import create_rng

logger = structlog.get_logger()

RGB = Tuple[int, int, int]


@dataclass
class ColorAssignment:
    """Color id per quad plus the display color of each id."""

    color_ids: List[int] = field(default_factory=list)
    palette: List[RGB] = field(default_factory=list)

    @property
    def color_count(self) -> int:
        return len(self.palette)

    def color_of(self, quad_index: int) -> RGB:
        return self.palette[self.color_ids[quad_index]]

    def __iter__(self) -> Iterator[RGB]:
        for quad_index in range(len(self.color_ids)):
            yield self.color_of(quad_index)


def assign_color_ids(adj: Sequence[Sequence[int]]) -> Tuple[List[int], int]:
    """
    First-fit color ids for each node of an adjacency list.

    Returns:
        (color_ids, color_count)
    """
    color_count = 0
    color_ids = [-1] * len(adj)

    for i, neighbors in enumerate(adj):
        used = {color_ids[n] for n in neighbors if color_ids[n] >= 0}
        for color_id in range(color_count):
            if color_id not in used:
                color_ids[i] = color_id
                break
        else:
            color_ids[i] = color_count
            color_count += 1

    return color_ids, color_count


def generate_palette(color_count: int, rng: Optional[np.random.Generator] = None) -> List[RGB]:
    """One random RGB color (0-255 per channel) per color id."""
    if rng is None:
        rng = create_rng()
    channels = rng.integers(0, 256, size=(color_count, 3))
    return [(int(r), int(g), int(b)) for r, g, b in channels]


def color(quads: Sequence[Quad], rng: Optional[np.random.Generator] = None,
          adj: Optional[Sequence[Sequence[int]]] = None) -> ColorAssignment:
    """
    Color a mesh so that adjacent quads get different colors.

    Args:
        quads: Quads in mesh order
        rng: Random source for the palette
        adj: Precomputed adjacency list; built from quads when omitted

    Returns:
        ColorAssignment parallel to quads
    """
    if adj is None:
        adj = build_adjacency(quads)
    assert len(adj) == len(quads), "adjacency does not match quad count"

    color_ids, color_count = assign_color_ids(adj)
    palette = generate_palette(color_count, rng)

    logger.info(
        "Color allocation done",
        quad_count=len(quads),
        color_count=color_count,
    )
    return ColorAssignment(color_ids=color_ids, palette=palette)
