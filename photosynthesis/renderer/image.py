"""Raster to Pillow image export.

Handy for snapshots and debugging where a terminal is not available: every
drawn cell becomes a ``cell_size`` square tinted with its colour, with the
glyph written on top.
"""

from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from photosynthesis.renderer.color import COLOR_RGB
from photosynthesis.renderer.raster import Raster, presence_mask

DEFAULT_CELL_SIZE = 12
BACKGROUND_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 255)
TINT_ALPHA = 48


def raster_to_image(raster: Raster, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """Render ``raster`` into an RGBA image of ``width * cell_size`` by
    ``height * cell_size`` pixels. Transparent cells stay background black.
    """
    width_px = raster.width * cell_size
    height_px = raster.height * cell_size
    if width_px == 0 or height_px == 0:
        return Image.new("RGBA", (width_px, height_px), BACKGROUND_RGBA)
    pixels = np.zeros((height_px, width_px, 4), dtype=np.uint8)
    pixels[...] = BACKGROUND_RGBA

    mask = presence_mask(raster)
    for y, x in zip(*np.nonzero(mask)):
        cell = raster.cell(int(x), int(y))
        assert cell is not None
        r, g, b = COLOR_RGB[cell.color]
        y0, x0 = int(y) * cell_size, int(x) * cell_size
        pixels[y0 : y0 + cell_size, x0 : x0 + cell_size] = (
            r * TINT_ALPHA // 255,
            g * TINT_ALPHA // 255,
            b * TINT_ALPHA // 255,
            255,
        )

    img = Image.fromarray(pixels)
    draw = ImageDraw.Draw(img)
    for y, x in zip(*np.nonzero(mask)):
        cell = raster.cell(int(x), int(y))
        assert cell is not None
        draw.text(
            (int(x) * cell_size + 2, int(y) * cell_size),
            cell.glyph,
            fill=COLOR_RGB[cell.color] + (255,),
        )
    return img
