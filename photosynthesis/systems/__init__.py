"""Board systems.

Each module holds pure functions that take a :class:`photosynthesis.board.Board`
and return a new one (or, for the light system, a derived report). Actions
validate with a public ``can_*`` predicate and raise the matching
:class:`photosynthesis.errors.IllegalAction` subclass when it fails.
"""

from .planting import can_plant_seed, plant_seed
from .growth import can_grow_plant, grow_plant
from .harvest import can_harvest, harvest
from .sun import end_phase, move_sun
from .light import get_photo_lp, shadows

__all__ = [
    "can_grow_plant",
    "can_harvest",
    "can_plant_seed",
    "end_phase",
    "get_photo_lp",
    "grow_plant",
    "harvest",
    "move_sun",
    "plant_seed",
    "shadows",
]
