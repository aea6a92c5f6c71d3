"""
Occupancy pattern generation.

Patterns are registered generators keyed by PatternType. The triangular
pattern is deterministic and is the default; the uniform pattern draws
from the pass generator. Pattern ids without a registered generator leave the
grid empty and log a warning, so new pattern kinds can be added later
without breaking callers.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Union

import numpy as np
import structlog

from .grid import OccupancyGrid
from ..utils.random import create_rng

logger = structlog.get_logger()


class PatternType(str, Enum):
    """Occupancy pattern ids."""

    TRIANGULAR = "triangular"
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
    PERLIN = "perlin"


PatternGenerator = Callable[[OccupancyGrid, np.random.Generator], None]

PATTERNS: Dict[PatternType, PatternGenerator] = {}


def register_pattern(pattern: PatternType):
    """Decorator registering a generator for a pattern id."""

    def decorator(fn: PatternGenerator) -> PatternGenerator:
        PATTERNS[PatternType(pattern)] = fn
        return fn

    return decorator


def list_patterns() -> List[str]:
    """Names of the patterns that have a generator."""
    return [pattern.value for pattern in PATTERNS]


def get_pattern(pattern: Union[PatternType, str]) -> Optional[PatternGenerator]:
    """Look up a generator, or None if the id is unknown or unimplemented."""
    try:
        return PATTERNS.get(PatternType(pattern))
    except ValueError:
        return None


@register_pattern(PatternType.TRIANGULAR)
def fill_triangular(grid: OccupancyGrid, rng: np.random.Generator) -> None:
    """Occupy (x, y) iff x <= y; row y gets cells 0..y."""
    for y in range(grid.side_length):
        for x in range(y + 1):
            grid.set(x, y)


@register_pattern(PatternType.UNIFORM)
def fill_uniform(grid: OccupancyGrid, rng: np.random.Generator) -> None:
    """Occupy each cell independently with probability 0.5."""
    s = grid.side_length
    draws = rng.random((s, s))
    for y, x in np.argwhere(draws > 0.5):
        grid.set(int(x), int(y))


def populate(
    grid: OccupancyGrid,
    pattern: Union[PatternType, str],
    rng: Optional[np.random.Generator] = None,
) -> OccupancyGrid:
    """
    Fill a grid in place according to a pattern.

    Args:
        grid: Grid to populate (usually freshly created and all-false)
        pattern: Pattern id
        rng: Random source for randomized patterns; a fresh one is
              created when omitted

    Returns:
        The same grid, for chaining
    """
    generator = get_pattern(pattern)
    pattern_name = pattern.value if isinstance(pattern, PatternType) else str(pattern)

    if generator is None:
        logger.warning(
            "Unsupported pattern, grid left empty",
            pattern=pattern_name,
            available=list_patterns(),
        )
        return grid

    if rng is None:
        rng = create_rng()

    generator(grid, rng)
    logger.debug(
        "Grid populated",
        pattern=pattern_name,
        side_length=grid.side_length,
        occupied=grid.occupied_count(),
    )
    return grid

