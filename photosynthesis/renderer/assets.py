"""Text-file graphics loader.

Each graphic ``N`` is a pair of parallel files under the asset root:

* ``N.txt`` holds the glyphs, one raster row per line;
* ``N.color`` holds one colour letter per glyph (see
  :data:`photosynthesis.renderer.color.COLOR_CODES`).

The configured ``none_char`` (a space by default) marks a transparent cell in
either file. Lines are not padded, so graphics may be jagged. A cell is drawn
only when both files have a character at that position.
"""

import logging
import os
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from photosynthesis.errors import AssetError, InvalidColorCode
from photosynthesis.renderer.color import ColorChar, color_of_code
from photosynthesis.renderer.raster import Pixel, Raster, raster_of_grid

logger = logging.getLogger(__name__)

DEFAULT_ASSET_ROOT = os.path.join(
    os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "assets", "graphics"
)
DEFAULT_NONE_CHAR = " "
GLYPH_SUFFIX = ".txt"
COLOR_SUFFIX = ".color"

CharGrid = List[List[Optional[str]]]
GraphicsLoader = Callable[[Sequence[str]], Mapping[str, Raster]]


def load_char_grid(path: str, none_char: str = DEFAULT_NONE_CHAR) -> CharGrid:
    """Read ``path`` into rows of characters, ``none_char`` becoming ``None``.

    A trailing newline does not produce an extra empty row.

    Raises:
        AssetError: The file cannot be opened, read or decoded as UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().split("\n")
    except OSError as e:
        raise AssetError(f"cannot read asset file {path}") from e
    except UnicodeDecodeError as e:
        raise AssetError(f"asset file {path} is not valid UTF-8") from e
    if lines and lines[-1] == "":
        lines.pop()
    return [[None if c == none_char else c for c in line.rstrip("\r")] for line in lines]


def combine_grids(name: str, glyphs: CharGrid, colors: CharGrid) -> List[List[Pixel]]:
    """Zip a glyph grid with a colour-letter grid into coloured cells.

    Raises:
        AssetError: The two grids differ in shape.
        InvalidColorCode: A colour letter is not recognised.
    """
    if len(glyphs) != len(colors):
        raise AssetError(
            f"{name}: {len(glyphs)} glyph rows but {len(colors)} color rows"
        )
    grid: List[List[Pixel]] = []
    for y, (glyph_row, color_row) in enumerate(zip(glyphs, colors)):
        if len(glyph_row) != len(color_row):
            raise AssetError(
                f"{name}: row {y} has {len(glyph_row)} glyphs but {len(color_row)} colors"
            )
        row: List[Pixel] = []
        for x, (glyph, code) in enumerate(zip(glyph_row, color_row)):
            if glyph is None or code is None:
                row.append(None)
                continue
            try:
                color = color_of_code(code)
            except InvalidColorCode as e:
                raise InvalidColorCode(code, where=f"{name}: row {y}, column {x}") from e
            row.append(ColorChar(glyph=glyph, color=color))
        grid.append(row)
    return grid


def load_graphic(
    name: str,
    asset_root: str = DEFAULT_ASSET_ROOT,
    none_char: str = DEFAULT_NONE_CHAR,
) -> Raster:
    """Load graphic ``name`` from its ``.txt`` / ``.color`` pair."""
    glyphs = load_char_grid(os.path.join(asset_root, name + GLYPH_SUFFIX), none_char)
    colors = load_char_grid(os.path.join(asset_root, name + COLOR_SUFFIX), none_char)
    raster = raster_of_grid(combine_grids(name, glyphs, colors))
    logger.debug("loaded graphic %s (%dx%d)", name, raster.width, raster.height)
    return raster


def load_graphics(
    names: Sequence[str],
    asset_root: str = DEFAULT_ASSET_ROOT,
    none_char: str = DEFAULT_NONE_CHAR,
) -> Dict[str, Raster]:
    """Load every graphic in ``names``; fails on the first broken one."""
    return {name: load_graphic(name, asset_root, none_char) for name in names}


def file_loader(
    asset_root: str = DEFAULT_ASSET_ROOT, none_char: str = DEFAULT_NONE_CHAR
) -> GraphicsLoader:
    """A :data:`GraphicsLoader` reading from ``asset_root``."""

    def load(names: Sequence[str]) -> Mapping[str, Raster]:
        return load_graphics(names, asset_root, none_char)

    return load
