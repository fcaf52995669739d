"""Plant component.

A plant belongs to exactly one player and sits in exactly one
:class:`photosynthesis.components.Cell`. Growing replaces the plant with a new
one at the next stage; harvesting removes it.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional

from photosynthesis.types import LightPoints, PlayerID


class PlantStage(IntEnum):
    """Growth stages in lifecycle order."""

    SEED = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3


_LIGHT_POINTS: Dict[PlantStage, LightPoints] = {
    PlantStage.SEED: 0,
    PlantStage.SMALL: 1,
    PlantStage.MEDIUM: 2,
    PlantStage.LARGE: 3,
}


def next_stage(stage: PlantStage) -> Optional[PlantStage]:
    """Stage after ``stage``; ``None`` once a plant is ``LARGE``."""
    if stage == PlantStage.LARGE:
        return None
    return PlantStage(stage + 1)


def light_points(stage: PlantStage) -> LightPoints:
    """Light points an unshadowed plant of ``stage`` collects."""
    return _LIGHT_POINTS[stage]


@dataclass(frozen=True)
class Plant:
    """A single plant.

    Attributes:
        owner: Player who planted it.
        stage: Current growth stage.
    """

    owner: PlayerID
    stage: PlantStage = PlantStage.SEED
