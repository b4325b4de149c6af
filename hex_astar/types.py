"""Shared types and protocols for hex-astar."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping, Protocol

Coord = tuple[int, ...]
OffsetCoord = tuple[int, int]
AxialCoord = tuple[int, int]
CubicCoord = tuple[int, int, int]
SpiralCoord = int
Cell = Coord | SpiralCoord

ComplexityMap = Mapping[Cell, float]

# Signed 32-bit coordinate domain. Neighbors falling outside it are dropped.
COORD_MIN = -(2**31)
COORD_MAX = 2**31 - 1


def in_domain(value: int) -> bool:
    return COORD_MIN <= value <= COORD_MAX


class Orientation(enum.Enum):
    """Vertical shift of odd columns in a flat-topped Offset layout.

    Rows grow northwards from an origin at the bottom left.
    """

    ODD_UP = "odd_up"
    ODD_DOWN = "odd_down"


@dataclass(frozen=True, slots=True)
class OffsetBounds:
    """Half-open ``[min, max)`` extent of an Offset grid on both axes."""

    min_column: int
    max_column: int
    min_row: int
    max_row: int

    def __post_init__(self) -> None:
        if self.min_column < 0 or self.min_row < 0:
            raise ValueError(
                f"offset bounds must be non-negative, got column>={self.min_column}, "
                f"row>={self.min_row}"
            )
        if self.max_column < self.min_column:
            raise ValueError(
                f"max_column must be >= min_column, got {self.max_column} < {self.min_column}"
            )
        if self.max_row < self.min_row:
            raise ValueError(
                f"max_row must be >= min_row, got {self.max_row} < {self.min_row}"
            )

    @classmethod
    def of_size(cls, columns: int, rows: int) -> OffsetBounds:
        return cls(0, columns, 0, rows)

    def contains(self, coord: OffsetCoord) -> bool:
        column, row = coord
        return (
            self.min_column <= column < self.max_column
            and self.min_row <= row < self.max_row
        )


class MalformedInputError(ValueError):
    """Raised when search input breaks the engine's preconditions."""

    def __init__(self, message: str, coord: Cell | None = None) -> None:
        self.coord = coord
        super().__init__(message)


class HexTopology(Protocol):
    def neighbors(self, cell: Cell) -> list[Cell]: ...
    def distance(self, a: Cell, b: Cell) -> int: ...
    def contains(self, cell: Cell) -> bool: ...
