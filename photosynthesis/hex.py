"""Axial hex coordinates and the six compass directions.

Coordinates use the ``(diag, col)`` axial scheme; the implicit third cube
axis is ``-diag - col``. Directions are ordered clockwise as seen on screen,
where ``diag`` grows to the right and ``col`` grows downward.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


@dataclass(frozen=True)
class HexCoord:
    """Axial hex coordinate.

    Attributes:
        diag: Diagonal axis (drawn horizontally).
        col: Column axis (drawn vertically).
    """

    diag: int
    col: int

    def __add__(self, other: "HexCoord") -> "HexCoord":
        return HexCoord(self.diag + other.diag, self.col + other.col)

    def __sub__(self, other: "HexCoord") -> "HexCoord":
        return HexCoord(self.diag - other.diag, self.col - other.col)


class Direction(IntEnum):
    """Six directions around a hex, clockwise starting east."""

    EAST = 0
    SOUTH_EAST = 1
    SOUTH_WEST = 2
    WEST = 3
    NORTH_WEST = 4
    NORTH_EAST = 5

    def rotate_cw(self) -> "Direction":
        """Next direction clockwise, wrapping after ``NORTH_EAST``."""
        return Direction((self.value + 1) % len(Direction))

    def opposite(self) -> "Direction":
        return Direction((self.value + 3) % len(Direction))


DIRECTION_OFFSETS: Dict[Direction, HexCoord] = {
    Direction.EAST: HexCoord(1, 0),
    Direction.SOUTH_EAST: HexCoord(0, 1),
    Direction.SOUTH_WEST: HexCoord(-1, 1),
    Direction.WEST: HexCoord(-1, 0),
    Direction.NORTH_WEST: HexCoord(0, -1),
    Direction.NORTH_EAST: HexCoord(1, -1),
}


def step(coord: HexCoord, direction: Direction) -> HexCoord:
    """Coordinate one hex away in ``direction`` (no bounds check)."""
    return coord + DIRECTION_OFFSETS[direction]


def hex_distance(a: HexCoord, b: HexCoord) -> int:
    """Number of hex steps between ``a`` and ``b``."""
    d = a - b
    return max(abs(d.diag), abs(d.col), abs(d.diag + d.col))
