"""Harvest system: removes a player's fully grown plant."""

import logging
from dataclasses import replace

from photosynthesis.board import Board, cell_at, plant_at
from photosynthesis.components import PlantStage
from photosynthesis.errors import IllegalHarvest
from photosynthesis.hex import HexCoord
from photosynthesis.types import PlayerID

logger = logging.getLogger(__name__)


def can_harvest(board: Board, player: PlayerID, coord: HexCoord) -> bool:
    plant = plant_at(board, coord)
    return (
        plant is not None and plant.stage == PlantStage.LARGE and plant.owner == player
    )


def harvest(board: Board, player: PlayerID, coord: HexCoord) -> Board:
    """Empty the cell at ``coord``, keeping its soil.

    Raises:
        IllegalHarvest: The cell does not hold a ``LARGE`` plant owned by
            ``player``.
    """
    if not can_harvest(board, player, coord):
        raise IllegalHarvest(coord, player)
    cell = cell_at(board, coord)
    assert cell is not None
    logger.debug("player %s harvested %s", player, coord)
    return replace(board, map=board.map.set_cell(cell.with_plant(None), coord))
