"""Shadow casting and light-point accrual.

A plant is scored by walking up to ``SHADOW_REACH`` hexes from it toward the
sun. If any plant met on the way shadows it, the plant collects nothing;
otherwise it collects :func:`photosynthesis.components.light_points` for its
stage. The walk stops early when it leaves the board.

Shadow reach depends on the caster's stage and the target's stage:

* seeds never cast shadows and are always in shadow themselves;
* a small plant shades small plants directly next to it;
* a medium plant shades small and medium plants up to two hexes away;
* a large plant shades any non-seed plant up to three hexes away.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from photosynthesis.board import Board
from photosynthesis.components import PlantStage, light_points
from photosynthesis.hex import Direction, HexCoord
from photosynthesis.hex_map import HexMap
from photosynthesis.types import LightPoints, PlayerID
from photosynthesis.utils.hexgrid import distance, neighbor

logger = logging.getLogger(__name__)

SHADOW_REACH = 3

# caster stage -> (reach, target stages it can shade)
_SHADOW_RULES: Dict[PlantStage, Tuple[int, Tuple[PlantStage, ...]]] = {
    PlantStage.SMALL: (1, (PlantStage.SMALL,)),
    PlantStage.MEDIUM: (2, (PlantStage.SMALL, PlantStage.MEDIUM)),
    PlantStage.LARGE: (3, (PlantStage.SMALL, PlantStage.MEDIUM, PlantStage.LARGE)),
}

PhotoReport = Dict[PlayerID, List[Tuple[HexCoord, LightPoints]]]


def shadows(hex_map: HexMap, caster: HexCoord, target: HexCoord) -> bool:
    """Return True if whatever stands at ``caster`` keeps ``target`` in shadow.

    Off-board casters shade nothing. Off-board targets, empty targets and
    seeds count as shadowed.
    """
    caster_cell = hex_map.cell_at(caster)
    if caster_cell is None:
        return False
    target_cell = hex_map.cell_at(target)
    if target_cell is None or target_cell.plant is None:
        return True
    target_stage = target_cell.plant.stage
    if target_stage == PlantStage.SEED:
        return True
    if caster_cell.plant is None or caster_cell.plant.stage == PlantStage.SEED:
        return False
    reach, shaded = _SHADOW_RULES[caster_cell.plant.stage]
    if target_stage not in shaded:
        return False
    dist = distance(hex_map, caster, target)
    if caster_cell.plant.stage == PlantStage.SMALL:
        return dist == reach
    return dist <= reach


def is_shadowed(hex_map: HexMap, coord: HexCoord, sun_dir: Direction) -> bool:
    """Walk toward the sun from ``coord`` and test each hex for a shadow."""
    current = coord
    for _ in range(SHADOW_REACH):
        upwind = neighbor(hex_map, current, sun_dir)
        if upwind is None:
            return False
        if shadows(hex_map, upwind, coord):
            return True
        current = upwind
    return False


def player_light_points(
    board: Board, sun_dir: Direction, coords: Iterable[HexCoord]
) -> List[Tuple[HexCoord, LightPoints]]:
    """Light points for each planted coordinate in ``coords``.

    Shadowed plants are listed with zero points.
    """
    out: List[Tuple[HexCoord, LightPoints]] = []
    for coord in coords:
        cell = board.map.cell_at(coord)
        if cell is None or cell.plant is None:
            continue
        if is_shadowed(board.map, coord, sun_dir):
            out.append((coord, 0))
        else:
            out.append((coord, light_points(cell.plant.stage)))
    return out


def get_photo_lp(
    board: Board, sun_dir: Direction, players: Iterable[PlayerID]
) -> PhotoReport:
    """Light points earned by each player's plants for ``sun_dir``.

    Args:
        board: Board to score.
        sun_dir: Sun position to score against (normally ``board.sun_dir``).
        players: Players to report on. Players without plants map to ``[]``.

    Returns:
        PhotoReport: ``player -> [(coord, points), ...]`` in board order.
    """
    flat = board.map.flatten()
    report: PhotoReport = {}
    for player in players:
        owned = [
            cell.coord
            for cell in flat
            if cell.plant is not None and cell.plant.owner == player
        ]
        report[player] = player_light_points(board, sun_dir, owned)
        logger.debug(
            "player %s collects %d light points facing %s",
            player,
            sum(points for _, points in report[player]),
            sun_dir.name,
        )
    return report
