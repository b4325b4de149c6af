"""SpiralGrid - ring-bounded hexagons labelled by a single spiral index."""
from __future__ import annotations

from typing import Iterator

from hex_astar.coords import cubic_distance, cubic_to_spiral, spiral_to_cubic
from hex_astar.cubic import cubic_neighbors
from hex_astar.types import SpiralCoord


def spiral_neighbors(source: SpiralCoord, radius: int) -> list[SpiralCoord]:
    return [
        cubic_to_spiral(cell)
        for cell in cubic_neighbors(spiral_to_cubic(source), radius)
    ]


class SpiralGrid:
    def __init__(self, radius: int) -> None:
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        self._radius = radius

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def size(self) -> int:
        """Number of cells, ``1 + 3n(n + 1)`` for radius ``n``."""
        return 1 + 3 * self._radius * (self._radius + 1)

    def contains(self, index: SpiralCoord) -> bool:
        return isinstance(index, int) and 0 <= index < self.size

    def neighbors(self, index: SpiralCoord) -> list[SpiralCoord]:
        return spiral_neighbors(index, self._radius)

    def distance(self, a: SpiralCoord, b: SpiralCoord) -> int:
        return cubic_distance(spiral_to_cubic(a), spiral_to_cubic(b))

    def cells(self) -> Iterator[SpiralCoord]:
        return iter(range(self.size))
