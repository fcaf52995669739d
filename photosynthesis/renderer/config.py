"""Compositor configuration.

``GuiConfig`` gathers everything :func:`photosynthesis.renderer.gui.init_gui`
needs: screen size, layer stack, which graphics to load and from where, and
the overlay draws applied after the board hexes.
"""

from dataclasses import dataclass
from typing import Tuple

from photosynthesis.renderer.assets import DEFAULT_ASSET_ROOT, DEFAULT_NONE_CHAR
from photosynthesis.renderer.color import Color, ColorChar


@dataclass(frozen=True)
class DrawInstruction:
    """Draw ``graphic`` with its top-left corner at ``(x, y)`` on ``layer``."""

    graphic: str
    x: int
    y: int
    layer: str


BACKGROUND = "background"
HEXES = "hexes"
HEXES2 = "hexes2"

DEFAULT_LAYER_ORDER: Tuple[str, ...] = (BACKGROUND, HEXES, HEXES2)
DEFAULT_GRAPHICS: Tuple[str, ...] = ("hex", "dot", "empty", "vert", "horiz")

DEFAULT_OVERLAYS: Tuple[DrawInstruction, ...] = (
    DrawInstruction("hex", 0, 0, HEXES),
    DrawInstruction("hex", 1, 1, HEXES2),
    DrawInstruction("empty", 10, 5, HEXES),
    DrawInstruction("horiz", 90, 29, HEXES2),
    DrawInstruction("vert", 99, 0, HEXES),
    DrawInstruction("hex", 91, 25, HEXES),
    DrawInstruction("hex", 50, 5, BACKGROUND),
)


@dataclass(frozen=True)
class GuiConfig:
    """Compositor settings.

    Attributes:
        width: Screen width in characters.
        height: Screen height in rows.
        background: Cell the back layer is filled with.
        layer_order: Layer names, back to front. The first is the background.
        graphic_names: Graphics loaded at start-up.
        hex_graphic: Graphic drawn at each board cell.
        hex_layer: Layer the board cells are drawn on.
        overlays: Extra draws applied after the board cells, in order.
        asset_root: Directory holding the ``.txt`` / ``.color`` pairs.
        none_char: Character meaning "transparent" in asset files.
    """

    width: int = 100
    height: int = 30
    background: ColorChar = ColorChar(".", Color.MAGENTA)
    layer_order: Tuple[str, ...] = DEFAULT_LAYER_ORDER
    graphic_names: Tuple[str, ...] = DEFAULT_GRAPHICS
    hex_graphic: str = "hex"
    hex_layer: str = HEXES
    overlays: Tuple[DrawInstruction, ...] = DEFAULT_OVERLAYS
    asset_root: str = DEFAULT_ASSET_ROOT
    none_char: str = DEFAULT_NONE_CHAR


DEFAULT_GUI_CONFIG = GuiConfig()
