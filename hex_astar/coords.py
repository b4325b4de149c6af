r"""Coordinate conversions and hex distances.

All three systems share compass directions. The Offset North neighbor
``(column, row + 1)`` maps onto Cubic North ``(x, y + 1, z - 1)`` and Axial
North ``(q, r - 1)``, so conversions never mirror the grid.

Spiral numbering labels a ring-bounded grid with a single integer: ``0`` is
the origin and ring ``k`` holds ``6k`` cells numbered from ``1 + 3k(k - 1)``,
starting ``k`` steps North of the origin and walking clockwise::

              _______
             /       \
     _______/    1    \_______
    /       \         /       \
   /    6    \_______/    2    \
   \         /       \         /
    \_______/    0    \_______/
    /       \         /       \
   /    5    \_______/    3    \
   \         /       \         /
    \_______/    4    \_______/
            \         /
             \_______/
"""
from __future__ import annotations

from hex_astar.types import (
    AxialCoord,
    CubicCoord,
    OffsetCoord,
    Orientation,
    SpiralCoord,
)

# Clockwise from North.
CUBIC_DIRECTIONS: list[CubicCoord] = [
    (0, 1, -1),   # N
    (1, 0, -1),   # NE
    (1, -1, 0),   # SE
    (0, -1, 1),   # S
    (-1, 0, 1),   # SW
    (-1, 1, 0),   # NW
]

# Spiral rings start at their North corner and walk SE, S, SW, NW, N, NE.
_RING_WALK = CUBIC_DIRECTIONS[2:] + CUBIC_DIRECTIONS[:2]


def _column_shift(column: int, orientation: Orientation) -> int:
    if orientation is Orientation.ODD_UP:
        return (column + (column & 1)) // 2
    return (column - (column & 1)) // 2


def offset_to_cubic(coord: OffsetCoord, orientation: Orientation) -> CubicCoord:
    column, row = coord
    x = column
    z = -row - _column_shift(column, orientation)
    return (x, -x - z, z)


def cubic_to_offset(coord: CubicCoord, orientation: Orientation) -> OffsetCoord:
    x, _, z = coord
    return (x, -z - _column_shift(x, orientation))


def axial_to_cubic(coord: AxialCoord) -> CubicCoord:
    q, r = coord
    return (q, -q - r, r)


def cubic_to_axial(coord: CubicCoord) -> AxialCoord:
    return (coord[0], coord[2])


def offset_to_axial(coord: OffsetCoord, orientation: Orientation) -> AxialCoord:
    return cubic_to_axial(offset_to_cubic(coord, orientation))


def axial_to_offset(coord: AxialCoord, orientation: Orientation) -> OffsetCoord:
    return cubic_to_offset(axial_to_cubic(coord), orientation)


def is_valid_cubic(coord: CubicCoord) -> bool:
    return len(coord) == 3 and sum(coord) == 0


def cubic_distance(a: CubicCoord, b: CubicCoord) -> int:
    """Minimum number of hex steps between two cubic coordinates."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]), abs(a[2] - b[2]))


def axial_distance(a: AxialCoord, b: AxialCoord) -> int:
    return cubic_distance(axial_to_cubic(a), axial_to_cubic(b))


def offset_distance(a: OffsetCoord, b: OffsetCoord, orientation: Orientation) -> int:
    return cubic_distance(offset_to_cubic(a, orientation), offset_to_cubic(b, orientation))


def ring_of_cubic(coord: CubicCoord) -> int:
    """Ring (distance from the origin) a cubic coordinate sits on."""
    return max(abs(coord[0]), abs(coord[1]), abs(coord[2]))


def ring_of_axial(coord: AxialCoord) -> int:
    q, r = coord
    return max(abs(q), abs(r), abs(q + r))


def _ring_start(ring: int) -> int:
    return 1 + 3 * ring * (ring - 1)


def spiral_ring(index: SpiralCoord) -> int:
    if index < 0:
        raise ValueError(f"spiral index must be >= 0, got {index}")
    ring = 0
    while 3 * ring * (ring + 1) < index:
        ring += 1
    return ring


def spiral_to_cubic(index: SpiralCoord) -> CubicCoord:
    ring = spiral_ring(index)
    if ring == 0:
        return (0, 0, 0)
    side, step = divmod(index - _ring_start(ring), ring)
    corner = CUBIC_DIRECTIONS[side]
    walk = _RING_WALK[side]
    return (
        corner[0] * ring + walk[0] * step,
        corner[1] * ring + walk[1] * step,
        corner[2] * ring + walk[2] * step,
    )


def cubic_to_spiral(coord: CubicCoord) -> SpiralCoord:
    if not is_valid_cubic(coord):
        raise ValueError(f"{coord} is not a cubic coordinate (x + y + z != 0)")
    ring = ring_of_cubic(coord)
    if ring == 0:
        return 0
    for side, (corner, walk) in enumerate(zip(CUBIC_DIRECTIONS, _RING_WALK)):
        origin = (corner[0] * ring, corner[1] * ring, corner[2] * ring)
        step = cubic_distance(coord, origin)
        if step >= ring:
            continue
        if coord == (
            origin[0] + walk[0] * step,
            origin[1] + walk[1] * step,
            origin[2] + walk[2] * step,
        ):
            return _ring_start(ring) + side * ring + step
    raise AssertionError(f"{coord} not found on ring {ring}")
