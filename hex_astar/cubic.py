"""CubicGrid - ring-bounded hexagons addressed by (x, y, z) with x + y + z == 0."""
from __future__ import annotations

from typing import Iterator

from hex_astar.axial import AxialGrid
from hex_astar.coords import (
    CUBIC_DIRECTIONS,
    axial_to_cubic,
    cubic_distance,
    is_valid_cubic,
    ring_of_cubic,
)
from hex_astar.types import CubicCoord, in_domain


def cubic_neighbors(source: CubicCoord, radius: int) -> list[CubicCoord]:
    """Return the neighbors of ``source`` lying within ``radius`` rings of the origin."""
    x, y, z = source
    result: list[CubicCoord] = []
    for dx, dy, dz in CUBIC_DIRECTIONS:
        cell = (x + dx, y + dy, z + dz)
        if not all(in_domain(v) for v in cell):
            continue
        if ring_of_cubic(cell) <= radius:
            result.append(cell)
    return result


class CubicGrid:
    def __init__(self, radius: int) -> None:
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        self._radius = radius

    @property
    def radius(self) -> int:
        return self._radius

    def contains(self, coord: CubicCoord) -> bool:
        return is_valid_cubic(coord) and ring_of_cubic(coord) <= self._radius

    def neighbors(self, coord: CubicCoord) -> list[CubicCoord]:
        return cubic_neighbors(coord, self._radius)

    def distance(self, a: CubicCoord, b: CubicCoord) -> int:
        return cubic_distance(a, b)

    def cells(self) -> Iterator[CubicCoord]:
        for coord in AxialGrid(self._radius).cells():
            yield axial_to_cubic(coord)
