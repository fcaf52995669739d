"""Plant growth system.

Growing is owner-gated and advances a plant exactly one stage. ``LARGE`` is
terminal: such plants can only be harvested.
"""

import logging
from dataclasses import replace

from photosynthesis.board import Board, cell_at, plant_at
from photosynthesis.components import Plant, next_stage
from photosynthesis.errors import IllegalGrowPlant
from photosynthesis.hex import HexCoord
from photosynthesis.types import PlayerID

logger = logging.getLogger(__name__)


def can_grow_plant(board: Board, player: PlayerID, coord: HexCoord) -> bool:
    """Return True if ``player`` owns a plant at ``coord`` that can still grow."""
    plant = plant_at(board, coord)
    if plant is None or plant.owner != player:
        return False
    return next_stage(plant.stage) is not None


def grow_plant(board: Board, coord: HexCoord, player: PlayerID) -> Board:
    """Replace the plant at ``coord`` with its next-stage successor.

    Args:
        board: Current board.
        coord: Location of the plant.
        player: Player asking to grow it; must own the plant.

    Returns:
        Board: Board with the grown plant. Ownership is unchanged.

    Raises:
        IllegalGrowPlant: No plant, a plant owned by someone else, or a
            ``LARGE`` plant.
    """
    if not can_grow_plant(board, player, coord):
        raise IllegalGrowPlant(coord, player)
    cell = cell_at(board, coord)
    assert cell is not None and cell.plant is not None
    stage = next_stage(cell.plant.stage)
    assert stage is not None
    grown = cell.with_plant(Plant(owner=cell.plant.owner, stage=stage))
    logger.debug("player %s grew %s to %s", player, coord, stage.name)
    return replace(board, map=board.map.set_cell(grown, coord))
