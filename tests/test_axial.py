"""
Test suite for AxialGrid and Axial neighbor generation.

Tests cover:
- Neighbor order (clockwise from North)
- Ring radius filtering
- Coordinate domain filtering
- Cell enumeration and membership
"""

import pytest
from hex_astar import AxialGrid, axial_neighbors
from hex_astar.types import COORD_MAX


class TestAxialNeighbors:
    """Test Axial neighbor generation."""

    def test_all_six_neighbors_clockwise_from_north(self):
        assert axial_neighbors((0, 0), 1) == [(0, -1), (1, -1), (1, 0), (0, 1), (-1, 1), (-1, 0)]

    def test_off_origin_neighbors(self):
        neighbors = axial_neighbors((2, -1), 3)
        assert neighbors == [(2, -2), (3, -2), (3, -1), (2, 0), (1, 0), (1, -1)]

    def test_ring_boundary_filters_neighbors(self):
        neighbors = axial_neighbors((-1, -1), 2)
        assert neighbors == [(0, -2), (0, -1), (-1, 0), (-2, 0)]

    def test_radius_zero_has_no_neighbors(self):
        assert axial_neighbors((0, 0), 0) == []

    def test_domain_overflow_is_dropped(self):
        neighbors = axial_neighbors((COORD_MAX, 0), 2**40)
        assert all(q <= COORD_MAX for q, _ in neighbors)
        assert len(neighbors) == 4


class TestAxialGrid:
    """Test AxialGrid topology."""

    def test_negative_radius_raises_value_error(self):
        with pytest.raises(ValueError):
            AxialGrid(-1)

    def test_contains(self):
        grid = AxialGrid(2)
        assert grid.contains((0, 0))
        assert grid.contains((2, -2))
        assert not grid.contains((2, 1))
        assert not grid.contains((0, 0, 0))

    def test_cells_count(self):
        assert len(list(AxialGrid(0).cells())) == 1
        assert len(list(AxialGrid(2).cells())) == 19
        assert len(set(AxialGrid(3).cells())) == 37

    def test_interior_neighbors_are_reciprocal(self):
        grid = AxialGrid(4)
        for cell in AxialGrid(3).cells():
            for neighbor in grid.neighbors(cell):
                assert cell in grid.neighbors(neighbor)

    def test_distance(self):
        grid = AxialGrid(3)
        assert grid.distance((1, -1), (1, 2)) == 3
