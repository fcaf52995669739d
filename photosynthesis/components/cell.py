"""Cell component: one board location with its soil and optional plant."""

from dataclasses import dataclass, replace
from typing import Optional

from photosynthesis.components.plant import Plant
from photosynthesis.hex import HexCoord


@dataclass(frozen=True)
class Cell:
    """Board location.

    Attributes:
        soil: Soil quality (richer towards the centre of the board).
        coord: Address of the cell; also its identity within a ``HexMap``.
        plant: Occupying plant, if any.
    """

    soil: int
    coord: HexCoord
    plant: Optional[Plant] = None

    def with_plant(self, plant: Optional[Plant]) -> "Cell":
        return replace(self, plant=plant)
