"""AxialGrid - ring-bounded hexagons addressed by (q, r)."""
from __future__ import annotations

from typing import Iterator

from hex_astar.coords import axial_distance, ring_of_axial
from hex_astar.types import AxialCoord, in_domain

# Clockwise from North: N, NE, SE, S, SW, NW.
AXIAL_DIRECTIONS: list[AxialCoord] = [(0, -1), (1, -1), (1, 0), (0, 1), (-1, 1), (-1, 0)]


def axial_neighbors(source: AxialCoord, radius: int) -> list[AxialCoord]:
    """Return the neighbors of ``source`` lying within ``radius`` rings of the origin."""
    q, r = source
    result: list[AxialCoord] = []
    for dq, dr in AXIAL_DIRECTIONS:
        nq, nr = q + dq, r + dr
        if not (in_domain(nq) and in_domain(nr)):
            continue
        if ring_of_axial((nq, nr)) <= radius:
            result.append((nq, nr))
    return result


class AxialGrid:
    def __init__(self, radius: int) -> None:
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        self._radius = radius

    @property
    def radius(self) -> int:
        return self._radius

    def contains(self, coord: AxialCoord) -> bool:
        return len(coord) == 2 and ring_of_axial(coord) <= self._radius

    def neighbors(self, coord: AxialCoord) -> list[AxialCoord]:
        return axial_neighbors(coord, self._radius)

    def distance(self, a: AxialCoord, b: AxialCoord) -> int:
        return axial_distance(a, b)

    def cells(self) -> Iterator[AxialCoord]:
        n = self._radius
        for q in range(-n, n + 1):
            for r in range(max(-n, -q - n), min(n, -q + n) + 1):
                yield (q, r)
