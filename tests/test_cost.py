"""
Test suite for the movement cost model.

Tests cover:
- Step cost between adjacent cells
- Guidance weight from grid distance
- Total cost along a path
"""

import pytest
from hex_astar import AxialGrid, OffsetGrid, guidance_weight, movement_cost, path_cost
from hex_astar.cost import astar_score


class TestMovementCost:
    """Test the cost of a single step."""

    def test_mean_of_both_complexities(self):
        assert movement_cost(1.0, 4.0) == 2.5
        assert movement_cost(9.0, 2.0) == 5.5

    def test_symmetric(self):
        assert movement_cost(3.0, 7.0) == movement_cost(7.0, 3.0)

    def test_zero_complexity(self):
        assert movement_cost(0.0, 0.0) == 0.0

    def test_astar_score(self):
        assert astar_score(6.5, 3.0) == 9.5


class TestGuidanceWeight:
    """Test the distance-to-goal guidance term."""

    def test_offset_weight(self):
        grid = OffsetGrid.of_size(4, 4)
        assert guidance_weight(grid, (0, 0), (3, 3)) == 5.0
        assert guidance_weight(grid, (3, 3), (3, 3)) == 0.0

    def test_axial_weight(self):
        grid = AxialGrid(2)
        assert guidance_weight(grid, (0, 0), (2, -2)) == 2.0

    def test_returns_float(self):
        grid = AxialGrid(2)
        assert isinstance(guidance_weight(grid, (0, 0), (1, 0)), float)


class TestPathCost:
    """Test total cost along a path."""

    def test_known_path(self):
        complexity = {
            (0, 0): 1.0, (0, 1): 1.0, (0, 2): 1.0,
            (1, 2): 4.0, (2, 3): 9.0, (3, 3): 2.0,
        }
        path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 3), (3, 3)]
        assert path_cost(path, complexity) == pytest.approx(16.5)

    def test_single_cell_costs_nothing(self):
        assert path_cost([(0, 0)], {(0, 0): 7.0}) == 0.0

    def test_missing_cell_raises_key_error(self):
        with pytest.raises(KeyError):
            path_cost([(0, 0), (0, 1)], {(0, 0): 1.0})
