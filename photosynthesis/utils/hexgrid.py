"""Map-aware hex geometry helpers.

Pure functions used by the light system and the compositor. They never raise
for off-board input; callers get ``None`` instead.
"""

from typing import Optional, Tuple

from photosynthesis.hex import Direction, HexCoord, hex_distance, step
from photosynthesis.hex_map import HexMap


def distance(hex_map: HexMap, a: HexCoord, b: HexCoord) -> int:
    """Hex steps between ``a`` and ``b`` under ``hex_map``'s addressing."""
    return hex_distance(a, b)


def neighbor(
    hex_map: HexMap, coord: HexCoord, direction: Direction
) -> Optional[HexCoord]:
    """Adjacent coordinate in ``direction``, or ``None`` if it is off-board."""
    if not hex_map.valid_coord(coord):
        return None
    adjacent = step(coord, direction)
    return adjacent if hex_map.valid_coord(adjacent) else None


def xy_of_hex_coord(coord: HexCoord) -> Tuple[int, int]:
    """Screen offset ``(x, y)`` of a coordinate: diagonal is horizontal."""
    return coord.diag, coord.col
