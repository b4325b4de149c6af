"""A* pathfinding over a hex topology weighted by per-cell complexity."""
from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hex_astar.axial import AxialGrid
from hex_astar.config import SearchConfig
from hex_astar.cost import astar_score, guidance_weight, movement_cost, path_cost
from hex_astar.cubic import CubicGrid
from hex_astar.offset import OffsetGrid
from hex_astar.spiral import SpiralGrid
from hex_astar.types import MalformedInputError

if TYPE_CHECKING:
    from hex_astar.types import (
        AxialCoord,
        Cell,
        ComplexityMap,
        CubicCoord,
        HexTopology,
        OffsetBounds,
        OffsetCoord,
        Orientation,
        SpiralCoord,
    )

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchRecord:
    """Best known route to a cell: cumulative cost, A* score and predecessor."""

    cost: float
    score: float
    parent: Cell | None


@dataclass(frozen=True)
class SearchResult:
    path: list[Cell]
    cost: float
    expansions: int


def reconstruct_path(ledger: dict[Cell, SearchRecord], goal: Cell) -> list[Cell]:
    """Walk predecessor links back from ``goal`` and return the start-to-goal path."""
    path: list[Cell] = [goal]
    seen = {goal}
    parent = ledger[goal].parent
    while parent is not None:
        if parent in seen:
            raise RuntimeError(f"predecessor cycle through {parent} while tracing {goal}")
        seen.add(parent)
        path.append(parent)
        parent = ledger[parent].parent
    path.reverse()
    return path


def _validate(topology: HexTopology, start: Cell, complexity: ComplexityMap) -> None:
    if start not in complexity:
        raise MalformedInputError(f"complexity map does not contain start cell {start}", start)
    if not topology.contains(start):
        raise MalformedInputError(f"start cell {start} is outside the searchable grid", start)
    for cell, value in complexity.items():
        if math.isnan(value) or value < 0:
            raise MalformedInputError(f"complexity of {cell} must be >= 0, got {value}", cell)


def search(
    topology: HexTopology,
    start: Cell,
    goal: Cell,
    complexity: ComplexityMap,
    config: SearchConfig | None = None,
) -> SearchResult | None:
    """Find the lowest-cost path from ``start`` to ``goal``.

    Only cells present in ``complexity`` are traversable. Frontier ties are
    resolved in discovery order, which follows the clockwise neighbor order
    of ``topology``, so results are deterministic. Returns None when the goal
    cannot be reached.
    """
    if config is None:
        config = SearchConfig()
    if config.validate_input:
        _validate(topology, start, complexity)

    if start == goal:
        return SearchResult(path=[start], cost=0.0, expansions=0)
    if goal not in complexity or not topology.contains(goal):
        logger.debug("goal %s is not a traversable cell", goal)
        return None

    neighbors = topology.neighbors

    start_score = guidance_weight(topology, start, goal)
    ledger: dict[Cell, SearchRecord] = {start: SearchRecord(0.0, start_score, None)}
    frontier: list[tuple[float, int, Cell]] = [(start_score, 0, start)]
    counter = 1
    expansions = 0
    found = False

    while frontier:
        score, _, current = heapq.heappop(frontier)
        record = ledger[current]
        if score > record.score:
            continue
        # Every entry still queued scores at least as high as the goal.
        if current == goal:
            found = True
            break

        expansions += 1
        here = complexity[current]
        for neighbor in neighbors(current):
            there = complexity.get(neighbor)
            if there is None:
                continue
            cost = record.cost + movement_cost(here, there)
            candidate = astar_score(cost, guidance_weight(topology, neighbor, goal))
            known = ledger.get(neighbor)
            if known is not None and known.score <= candidate:
                continue
            ledger[neighbor] = SearchRecord(cost, candidate, current)
            heapq.heappush(frontier, (candidate, counter, neighbor))
            counter += 1

    if not found:
        logger.debug("no path from %s to %s after %d expansions", start, goal, expansions)
        return None

    path = reconstruct_path(ledger, goal)
    total = path_cost(path, complexity)
    logger.debug(
        "path from %s to %s: %d cells, cost %.3f, %d expansions",
        start, goal, len(path), total, expansions,
    )
    return SearchResult(path=path, cost=total, expansions=expansions)


def pathfind(
    topology: HexTopology,
    start: Cell,
    goal: Cell,
    complexity: ComplexityMap,
    config: SearchConfig | None = None,
) -> list[Cell] | None:
    result = search(topology, start, goal, complexity, config)
    return None if result is None else result.path


def find_path_offset(
    start: OffsetCoord,
    goal: OffsetCoord,
    complexity: ComplexityMap,
    bounds: OffsetBounds,
    orientation: Orientation,
    config: SearchConfig | None = None,
) -> list[OffsetCoord] | None:
    return pathfind(OffsetGrid(bounds, orientation), start, goal, complexity, config)


def find_path_axial(
    start: AxialCoord,
    goal: AxialCoord,
    complexity: ComplexityMap,
    radius: int,
    config: SearchConfig | None = None,
) -> list[AxialCoord] | None:
    return pathfind(AxialGrid(radius), start, goal, complexity, config)


def find_path_cubic(
    start: CubicCoord,
    goal: CubicCoord,
    complexity: ComplexityMap,
    radius: int,
    config: SearchConfig | None = None,
) -> list[CubicCoord] | None:
    return pathfind(CubicGrid(radius), start, goal, complexity, config)


def find_path_spiral(
    start: SpiralCoord,
    goal: SpiralCoord,
    complexity: ComplexityMap,
    radius: int,
    config: SearchConfig | None = None,
) -> list[SpiralCoord] | None:
    return pathfind(SpiralGrid(radius), start, goal, complexity, config)
