"""Movement cost and guidance weight.

Moving between adjacent cells spends half the trip inside each of them, so
the step cost is the mean of the two complexities. The start cell's own
complexity is never charged on its own.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from hex_astar.types import Cell, ComplexityMap, HexTopology


def movement_cost(source_complexity: float, target_complexity: float) -> float:
    return 0.5 * source_complexity + 0.5 * target_complexity


def guidance_weight(topology: HexTopology, cell: Cell, goal: Cell) -> float:
    """Minimum number of hex steps from ``cell`` to ``goal``."""
    return float(topology.distance(cell, goal))


def astar_score(cumulative_cost: float, weight: float) -> float:
    return cumulative_cost + weight


def path_cost(path: Sequence[Cell], complexity: ComplexityMap) -> float:
    """Total movement cost of walking ``path`` in order."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += movement_cost(complexity[a], complexity[b])
    return total
