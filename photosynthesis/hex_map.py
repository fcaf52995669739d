"""Hex-grid container.

A :class:`HexMap` is a hexagon of radius ``radius`` around ``center``; every
coordinate within that distance is part of the footprint and everything else
is off-board. Cells are held in a persistent map keyed by coordinate, so a
board is sparse rather than a padded rectangle and updates share structure
with the previous map.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from pyrsistent import PMap, pmap

from photosynthesis.components import Cell
from photosynthesis.errors import InvalidCoordinate
from photosynthesis.hex import HexCoord, hex_distance

DEFAULT_RADIUS = 3
MAX_SOIL = 4


@dataclass(frozen=True)
class HexMap:
    """Immutable hex board.

    Attributes:
        radius: Largest distance from ``center`` that is still on the board.
        center: Middle hex. Chosen so every on-board coordinate is non-negative.
        cells: Cells keyed by their own coordinate.
    """

    radius: int
    center: HexCoord
    cells: PMap[HexCoord, Cell] = pmap()

    def valid_coord(self, coord: HexCoord) -> bool:
        """Return True if ``coord`` lies inside the board footprint."""
        return hex_distance(self.center, coord) <= self.radius

    def cell_at(self, coord: HexCoord) -> Optional[Cell]:
        return self.cells.get(coord)

    def set_cell(self, cell: Optional[Cell], coord: HexCoord) -> "HexMap":
        """Return a map with the cell at ``coord`` replaced.

        Passing ``None`` removes the cell.

        Raises:
            InvalidCoordinate: ``coord`` is off-board, or ``cell.coord`` differs
                from ``coord``.
        """
        if not self.valid_coord(coord):
            raise InvalidCoordinate(f"{coord} is outside a radius {self.radius} board")
        if cell is None:
            return replace(self, cells=self.cells.discard(coord))
        if cell.coord != coord:
            raise InvalidCoordinate(f"cell for {cell.coord} cannot be stored at {coord}")
        return replace(self, cells=self.cells.set(coord, cell))

    def flatten(self) -> Tuple[Cell, ...]:
        """All present cells, ordered by ``(diag, col)``."""
        return tuple(
            self.cells[coord]
            for coord in sorted(self.cells.keys(), key=lambda c: (c.diag, c.col))
        )


def footprint(radius: int, center: HexCoord) -> Tuple[HexCoord, ...]:
    """Every coordinate within ``radius`` of ``center``, ordered by ``(diag, col)``."""
    coords = []
    for dd in range(-radius, radius + 1):
        for dc in range(max(-radius, -dd - radius), min(radius, -dd + radius) + 1):
            coords.append(HexCoord(center.diag + dd, center.col + dc))
    return tuple(coords)


def init_map(radius: int = DEFAULT_RADIUS) -> HexMap:
    """Build the standard empty board.

    Soil quality drops by one per ring, from ``MAX_SOIL`` at the centre.
    """
    center = HexCoord(radius, radius)
    cells = {
        coord: Cell(soil=max(1, MAX_SOIL - hex_distance(center, coord)), coord=coord)
        for coord in footprint(radius, center)
    }
    return HexMap(radius=radius, center=center, cells=pmap(cells))
