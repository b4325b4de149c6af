"""hex-astar - Complexity-weighted A* pathfinding on hexagonal grids."""
from __future__ import annotations

from hex_astar.axial import AxialGrid, axial_neighbors
from hex_astar.config import SearchConfig
from hex_astar.coords import (
    axial_distance,
    axial_to_cubic,
    axial_to_offset,
    cubic_distance,
    cubic_to_axial,
    cubic_to_offset,
    cubic_to_spiral,
    offset_distance,
    offset_to_axial,
    offset_to_cubic,
    spiral_to_cubic,
)
from hex_astar.cost import guidance_weight, movement_cost, path_cost
from hex_astar.cubic import CubicGrid, cubic_neighbors
from hex_astar.offset import OffsetGrid, offset_neighbors
from hex_astar.pathfind import (
    SearchResult,
    find_path_axial,
    find_path_cubic,
    find_path_offset,
    find_path_spiral,
    pathfind,
    search,
)
from hex_astar.spiral import SpiralGrid, spiral_neighbors
from hex_astar.types import (
    AxialCoord,
    Cell,
    ComplexityMap,
    CubicCoord,
    HexTopology,
    MalformedInputError,
    OffsetBounds,
    OffsetCoord,
    Orientation,
    SpiralCoord,
)

__all__ = [
    "AxialCoord",
    "AxialGrid",
    "Cell",
    "ComplexityMap",
    "CubicCoord",
    "CubicGrid",
    "HexTopology",
    "MalformedInputError",
    "OffsetBounds",
    "OffsetCoord",
    "OffsetGrid",
    "Orientation",
    "SearchConfig",
    "SearchResult",
    "SpiralCoord",
    "SpiralGrid",
    "axial_distance",
    "axial_neighbors",
    "axial_to_cubic",
    "axial_to_offset",
    "cubic_distance",
    "cubic_neighbors",
    "cubic_to_axial",
    "cubic_to_offset",
    "cubic_to_spiral",
    "find_path_axial",
    "find_path_cubic",
    "find_path_offset",
    "find_path_spiral",
    "guidance_weight",
    "movement_cost",
    "offset_distance",
    "offset_neighbors",
    "offset_to_axial",
    "offset_to_cubic",
    "path_cost",
    "pathfind",
    "search",
    "spiral_neighbors",
    "spiral_to_cubic",
]
