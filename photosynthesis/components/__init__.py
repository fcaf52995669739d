"""photosynthesis.components
=================================

Value objects stored on the board. ``Plant`` carries ownership and growth
stage; ``Cell`` pairs a coordinate and soil quality with an optional plant.
Both are frozen dataclasses; systems replace them rather than editing them::

    from photosynthesis.components import Cell, Plant, PlantStage
"""

from .plant import Plant, PlantStage, light_points, next_stage
from .cell import Cell

__all__ = [
    "Cell",
    "Plant",
    "PlantStage",
    "light_points",
    "next_stage",
]
