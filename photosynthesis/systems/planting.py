"""Seed planting system."""

import logging
from dataclasses import replace

from photosynthesis.board import Board, cell_at, plant_at
from photosynthesis.components import Plant, PlantStage
from photosynthesis.errors import IllegalPlantSeed
from photosynthesis.hex import HexCoord
from photosynthesis.types import PlayerID

logger = logging.getLogger(__name__)


def can_plant_seed(board: Board, player: PlayerID, coord: HexCoord) -> bool:
    """Return True if ``coord`` holds a cell without a plant."""
    # TODO: require coord to be within seeding range of one of the player's trees.
    return cell_at(board, coord) is not None and plant_at(board, coord) is None


def plant_seed(board: Board, player: PlayerID, coord: HexCoord) -> Board:
    """Place a seed owned by ``player`` at ``coord``.

    Raises:
        IllegalPlantSeed: ``coord`` is off-board, has no cell or is occupied.
    """
    cell = cell_at(board, coord)
    if cell is None or not can_plant_seed(board, player, coord):
        raise IllegalPlantSeed(coord, player)
    seeded = cell.with_plant(Plant(owner=player, stage=PlantStage.SEED))
    logger.debug("player %s planted a seed at %s", player, coord)
    return replace(board, map=board.map.set_cell(seeded, coord))
