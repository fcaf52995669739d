from typing import Dict, Mapping, Sequence, Tuple

from pyrsistent import pmap

from photosynthesis.board import Board, init_board
from photosynthesis.components import Plant, PlantStage
from photosynthesis.hex import Direction, HexCoord
from photosynthesis.renderer.color import Color, ColorChar
from photosynthesis.renderer.raster import Raster, raster_of_grid
from photosynthesis.types import PlayerID

CENTER = HexCoord(3, 3)

PlantEntry = Tuple[PlayerID, PlantStage]


def with_plants(
    board: Board, plants: Mapping[HexCoord, PlantEntry]
) -> Board:
    """Return ``board`` with plants placed directly, bypassing the rules."""
    hex_map = board.map
    for coord, (owner, stage) in plants.items():
        cell = hex_map.cell_at(coord)
        assert cell is not None, f"{coord} has no cell"
        hex_map = hex_map.set_cell(cell.with_plant(Plant(owner, stage)), coord)
    return Board(map=hex_map, sun_dir=board.sun_dir, rules=board.rules)


def make_board(
    plants: Mapping[HexCoord, PlantEntry] = pmap(),
    sun_dir: Direction = Direction.EAST,
) -> Board:
    """Standard radius-3 board with ``plants`` and the sun at ``sun_dir``."""
    board = init_board()
    board = Board(map=board.map, sun_dir=sun_dir, rules=board.rules)
    return with_plants(board, plants)


def make_raster(rows: Sequence[str], color: Color = Color.WHITE) -> Raster:
    """Raster from strings; spaces are transparent."""
    return raster_of_grid(
        [[None if c == " " else ColorChar(c, color) for c in row] for row in rows]
    )


def glyphs(raster: Raster) -> Tuple[str, ...]:
    """Rows of ``raster`` as strings, transparent cells shown as spaces."""
    return tuple(
        "".join(" " if c is None else c.glyph for c in row) for row in raster.grid
    )


def lp_of(report: Dict[PlayerID, list], player: PlayerID) -> Dict[HexCoord, int]:
    return dict(report[player])
