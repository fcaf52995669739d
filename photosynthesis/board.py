"""Immutable ``Board`` value and read-only queries.

The board is the root of the rules engine: a :class:`HexMap`, the current sun
direction and the ruleset in play. Actions live in :mod:`photosynthesis.systems`
as pure functions ``(Board, ...) -> Board``; each returns a new board and
leaves its input untouched.

Sun direction convention: ``sun_dir`` points from a plant toward the sun.
Shadows therefore fall in ``sun_dir.opposite()``, and a plant is shaded by
plants found by walking from it in ``sun_dir``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from photosynthesis.components import Cell, Plant
from photosynthesis.hex import Direction, HexCoord
from photosynthesis.hex_map import DEFAULT_RADIUS, HexMap, init_map
from photosynthesis.types import Ruleset


@dataclass(frozen=True)
class Board:
    """Game board snapshot.

    Attributes:
        map: Cells of the board.
        sun_dir: Direction the sun lies in, seen from any plant.
        rules: Ruleset variant.
    """

    map: HexMap
    sun_dir: Direction = Direction.EAST
    rules: Ruleset = Ruleset.NORMAL


def init_board(rules: Ruleset = Ruleset.NORMAL, radius: int = DEFAULT_RADIUS) -> Board:
    """Fresh board: empty standard map with the sun in its first position."""
    return Board(map=init_map(radius), sun_dir=Direction.EAST, rules=rules)


def cell_at(board: Board, coord: HexCoord) -> Optional[Cell]:
    return board.map.cell_at(coord)


def valid_coord(board: Board, coord: HexCoord) -> bool:
    return board.map.valid_coord(coord)


def plant_at(board: Board, coord: HexCoord) -> Optional[Plant]:
    """Plant at ``coord``, or ``None`` for empty or off-board coordinates."""
    cell = board.map.cell_at(coord)
    if cell is None:
        return None
    return cell.plant


def cells(board: Board) -> Tuple[Cell, ...]:
    return board.map.flatten()
