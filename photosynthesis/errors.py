"""Exception taxonomy.

Two families exist:

* :class:`IllegalAction` subclasses are raised by board actions whose rule
  precondition failed. Game loops are expected to consult the matching
  ``can_*`` predicate first, so one of these escaping means a caller bug.
* :class:`RenderError` and :class:`AssetError` subclasses signal structural
  problems (unknown layer or graphic, out-of-bounds draws, broken asset
  files). They are not recoverable at the point they are raised.
"""

from typing import Optional

from photosynthesis.hex import HexCoord
from photosynthesis.types import PlayerID


class IllegalAction(ValueError):
    """A board action was attempted while its precondition does not hold."""

    action = "act"

    def __init__(self, coord: HexCoord, player: Optional[PlayerID] = None):
        self.coord = coord
        self.player = player
        who = "" if player is None else f"player {player} "
        super().__init__(f"{who}cannot {self.action} at {coord}")


class IllegalPlantSeed(IllegalAction):
    action = "plant a seed"


class IllegalGrowPlant(IllegalAction):
    action = "grow a plant"


class IllegalHarvest(IllegalAction):
    action = "harvest"


class InvalidCoordinate(ValueError):
    """Coordinate outside the board footprint (or not matching its cell)."""


class RenderError(Exception):
    """Base class for compositor and raster failures."""


class LayerNotFound(RenderError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No layer named {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class GraphicNotFound(RenderError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No graphic named {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class DrawOutOfBounds(RenderError):
    """A draw would place source cells outside the target raster."""


class LayerSizeMismatch(RenderError):
    """Two layers being merged do not share the same shape."""


class AssetError(Exception):
    """An asset file is missing, unreadable or malformed."""


class InvalidColorCode(AssetError):
    def __init__(self, code: str, where: Optional[str] = None):
        self.code = code
        self.where = where
        message = f"invalid color code {code!r}"
        if where is not None:
            message = f"{where}: {message}"
        super().__init__(message)
