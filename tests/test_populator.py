"""Tests for occupancy pattern generation."""

import pytest
import numpy as np
from structlog.testing import capture_logs

from py_gmesh.core.grid import OccupancyGrid
from py_gmesh.core.populator import (
    PATTERNS, PatternType, get_pattern, list_patterns, populate, register_pattern
)
from py_gmesh.utils.random import create_rng


class TestTriangularPattern:
    """Test the deterministic triangular pattern."""

    def test_side_length_four(self):
        grid = populate(OccupancyGrid(4), PatternType.TRIANGULAR)

        assert grid.occupied_cells() == {
            (0, 0),
            (0, 1), (1, 1),
            (0, 2), (1, 2), (2, 2),
            (0, 3), (1, 3), (2, 3), (3, 3),
        }

    @pytest.mark.parametrize("side_length", [1, 5, 20, 100])
    def test_row_run_lengths(self, side_length):
        """Row y holds exactly cells 0..y."""
        grid = populate(OccupancyGrid(side_length), "triangular")
        rows = grid.as_array()

        for y in range(side_length):
            assert rows[y].sum() == y + 1
            assert rows[y, : y + 1].all()

        assert grid.occupied_count() == side_length * (side_length + 1) // 2


class TestUniformPattern:
    """Test the randomized uniform pattern."""

    def test_same_seed_same_grid(self):
        grid1 = populate(OccupancyGrid(20), PatternType.UNIFORM, create_rng("seed"))
        grid2 = populate(OccupancyGrid(20), PatternType.UNIFORM, create_rng("seed"))

        np.testing.assert_array_equal(grid1.cells, grid2.cells)

    def test_different_seeds(self):
        grid1 = populate(OccupancyGrid(20), PatternType.UNIFORM, create_rng("seed1"))
        grid2 = populate(OccupancyGrid(20), PatternType.UNIFORM, create_rng("seed2"))

        assert not np.array_equal(grid1.cells, grid2.cells)

    def test_roughly_half_occupied(self):
        grid = populate(OccupancyGrid(100), PatternType.UNIFORM, create_rng("density"))
        fraction = grid.occupied_count() / 10000

        assert 0.4 < fraction < 0.6

    def test_cells_follow_generator_draws(self):
        """Cell (x, y) is occupied iff draw [y, x] exceeds 0.5."""
        grid = populate(OccupancyGrid(6), PatternType.UNIFORM, create_rng("draws"))
        expected = create_rng("draws").random((6, 6)) > 0.5

        np.testing.assert_array_equal(grid.as_array(), expected)

    def test_unseeded_runs(self):
        grid = populate(OccupancyGrid(10), PatternType.UNIFORM)
        assert 0 <= grid.occupied_count() <= 100


class TestUnsupportedPatterns:
    """Unknown or unimplemented patterns leave the grid empty with a warning."""

    @pytest.mark.parametrize("pattern", ["gaussian", PatternType.PERLIN, "checkerboard", ""])
    def test_warning_and_empty_grid(self, pattern):
        with capture_logs() as logs:
            grid = populate(OccupancyGrid(5), pattern)

        assert grid.is_empty()
        warnings = [log for log in logs if log["log_level"] == "warning"]
        assert len(warnings) == 1
        assert "Unsupported pattern" in warnings[0]["event"]

    def test_get_pattern_unknown(self):
        assert get_pattern("nope") is None
        assert get_pattern(PatternType.GAUSSIAN) is None


class TestPatternRegistry:
    """Test the pattern extension point."""

    def test_builtin_patterns(self):
        assert list_patterns() == ["triangular", "uniform"]

    def test_register_new_pattern(self):
        @register_pattern(PatternType.GAUSSIAN)
        def fill_diagonal(grid, rng):
            for i in range(grid.side_length):
                grid.set(i, i)

        try:
            grid = populate(OccupancyGrid(5), "gaussian")
            assert grid.occupied_cells() == {(i, i) for i in range(5)}
            assert "gaussian" in list_patterns()
        finally:
            del PATTERNS[PatternType.GAUSSIAN]

        assert get_pattern(PatternType.GAUSSIAN) is None
