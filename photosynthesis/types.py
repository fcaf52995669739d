"""Common type aliases and enumerations.

``PlayerID`` identifies plant owners; ``Ruleset`` says which variant of the
game a :class:`photosynthesis.board.Board` is playing.
"""

from enum import StrEnum, auto

PlayerID = int


class Ruleset(StrEnum):
    """Game variant carried on the board."""

    NORMAL = auto()
    EXTENDED = auto()


LightPoints = int
