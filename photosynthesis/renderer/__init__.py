"""Rendering subpackage.

Turns board cells into a terminal picture:

* :mod:`~photosynthesis.renderer.raster` holds the immutable character grids
  and the transparency-aware ``draw`` / ``merge`` operations.
* :mod:`~photosynthesis.renderer.assets` loads graphics from paired
  ``.txt`` / ``.color`` files.
* :mod:`~photosynthesis.renderer.gui` stacks named layers and prints them.
* :mod:`~photosynthesis.renderer.image` exports a raster as a Pillow image.
"""
