r"""OffsetGrid - flat-topped hexagons addressed by (column, row).

The origin sits at the bottom left and rows grow northwards. With
``Orientation.ODD_UP`` odd columns are drawn half a cell higher than even
ones::

                 _______
                /       \
        _______/  (1,1)  \_______
       /       \         /       \
      /  (0,1)  \_______/  (2,1)  \
      \         /       \         /
       \_______/  (1,0)  \_______/
       /       \         /       \
      /  (0,0)  \_______/  (2,0)  \
      \         /       \         /
       \_______/         \_______/

``Orientation.ODD_DOWN`` draws odd columns half a cell lower instead, so
the neighbor table used for a column depends on its parity and the
orientation together.
"""
from __future__ import annotations

from typing import Iterator

from hex_astar.coords import offset_distance
from hex_astar.types import COORD_MAX, OffsetBounds, OffsetCoord, Orientation

# Clockwise from North: N, NE, SE, S, SW, NW.
_LOWERED_COLUMN = [(0, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0)]
_RAISED_COLUMN = [(0, 1), (1, 1), (1, 0), (0, -1), (-1, 0), (-1, 1)]


def _is_raised(column: int, orientation: Orientation) -> bool:
    odd = column & 1 == 1
    return odd if orientation is Orientation.ODD_UP else not odd


def offset_neighbors(
    source: OffsetCoord,
    bounds: OffsetBounds,
    orientation: Orientation,
) -> list[OffsetCoord]:
    """Return the in-bounds neighbors of ``source``, clockwise from North.

    Candidates that would leave the unsigned coordinate domain are dropped
    the same way as candidates outside ``bounds``.
    """
    column, row = source
    deltas = _RAISED_COLUMN if _is_raised(column, orientation) else _LOWERED_COLUMN
    result: list[OffsetCoord] = []
    for dc, dr in deltas:
        nc, nr = column + dc, row + dr
        if not (0 <= nc <= COORD_MAX and 0 <= nr <= COORD_MAX):
            continue
        if bounds.contains((nc, nr)):
            result.append((nc, nr))
    return result


class OffsetGrid:
    def __init__(self, bounds: OffsetBounds, orientation: Orientation) -> None:
        self._bounds = bounds
        self._orientation = orientation

    @classmethod
    def of_size(
        cls, columns: int, rows: int, orientation: Orientation = Orientation.ODD_UP
    ) -> OffsetGrid:
        return cls(OffsetBounds.of_size(columns, rows), orientation)

    @property
    def bounds(self) -> OffsetBounds:
        return self._bounds

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def contains(self, coord: OffsetCoord) -> bool:
        return len(coord) == 2 and self._bounds.contains(coord)

    def neighbors(self, coord: OffsetCoord) -> list[OffsetCoord]:
        return offset_neighbors(coord, self._bounds, self._orientation)

    def distance(self, a: OffsetCoord, b: OffsetCoord) -> int:
        return offset_distance(a, b, self._orientation)

    def cells(self) -> Iterator[OffsetCoord]:
        b = self._bounds
        for column in range(b.min_column, b.max_column):
            for row in range(b.min_row, b.max_row):
                yield (column, row)
