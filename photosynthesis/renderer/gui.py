"""Layered compositor.

A :class:`Gui` holds equally sized layer rasters, the order they stack in and
a cache of loaded graphics. Drawing happens through :func:`update_layer`,
which swaps one layer for ``transform(layer)``; :func:`draw_graphic` builds
such a transform for a named graphic. :func:`render` flattens the stack back
to front and prints it with ANSI colours.

Screen coordinates: ``x`` is the column offset, ``y`` the row offset. Board
cells are placed with :func:`photosynthesis.utils.hexgrid.xy_of_hex_coord`.
"""

import logging
import sys
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, TextIO, Tuple

from pyrsistent import PMap, pmap

from photosynthesis.components import Cell
from photosynthesis.errors import GraphicNotFound, LayerNotFound
from photosynthesis.hex import Direction
from photosynthesis.renderer.assets import GraphicsLoader, file_loader
from photosynthesis.renderer.config import (
    DEFAULT_GUI_CONFIG,
    DrawInstruction,
    GuiConfig,
)
from photosynthesis.renderer.raster import (
    Raster,
    blank_raster,
    draw,
    fill_raster,
    merge_layers,
)
from photosynthesis.utils.hexgrid import xy_of_hex_coord

logger = logging.getLogger(__name__)

LayerTransform = Callable[[Raster], Raster]


@dataclass(frozen=True)
class Gui:
    """Compositor state.

    Attributes:
        width: Width shared by every layer.
        height: Height shared by every layer.
        layers: Layer rasters by name.
        layer_order: Layer names, back to front.
        graphics: Loaded graphics by name.
        hex_graphic: Graphic drawn for a board cell.
        hex_layer: Layer board cells go on.
    """

    width: int
    height: int
    layers: PMap[str, Raster] = pmap()
    layer_order: Tuple[str, ...] = ()
    graphics: PMap[str, Raster] = pmap()
    hex_graphic: str = "hex"
    hex_layer: str = "hexes"


def graphic(gui: Gui, name: str) -> Raster:
    if name not in gui.graphics:
        raise GraphicNotFound(name)
    return gui.graphics[name]


def draw_graphic(gui: Gui, name: str, x: int, y: int) -> LayerTransform:
    """Layer transform drawing graphic ``name`` at ``(x, y)``.

    The graphic is resolved immediately, so an unknown name fails here rather
    than when the transform runs.

    Raises:
        GraphicNotFound: ``name`` was never loaded.
    """
    source = graphic(gui, name)

    def transform(layer: Raster) -> Raster:
        return draw(layer, source, x, y)

    return transform


def update_layer(name: str, transform: LayerTransform, gui: Gui) -> Gui:
    """Replace layer ``name`` with ``transform(layer)``.

    Raises:
        LayerNotFound: No layer is called ``name``.
    """
    if name not in gui.layers:
        raise LayerNotFound(name)
    return replace(gui, layers=gui.layers.set(name, transform(gui.layers[name])))


def apply_draw(gui: Gui, instruction: DrawInstruction) -> Gui:
    return update_layer(
        instruction.layer,
        draw_graphic(gui, instruction.graphic, instruction.x, instruction.y),
        gui,
    )


def draw_hex(gui: Gui, cell: Cell) -> Gui:
    """Draw the hex graphic for ``cell`` at its screen position."""
    x, y = xy_of_hex_coord(cell.coord)
    return update_layer(gui.hex_layer, draw_graphic(gui, gui.hex_graphic, x, y), gui)


def draw_hexes(gui: Gui, cells: Iterable[Cell]) -> Gui:
    for cell in cells:
        gui = draw_hex(gui, cell)
    return gui


def update_cells(gui: Gui, overlays: Iterable[DrawInstruction]) -> Gui:
    """Apply ``overlays`` in order."""
    for instruction in overlays:
        gui = apply_draw(gui, instruction)
    return gui


def update_sun(gui: Gui, direction: Direction) -> Gui:
    """Reflect a new sun direction. Nothing on screen depends on it yet."""
    return gui


def init_gui(
    cells: Iterable[Cell],
    config: GuiConfig = DEFAULT_GUI_CONFIG,
    loader: Optional[GraphicsLoader] = None,
) -> Gui:
    """Build the compositor for a board.

    Creates ``config.layer_order`` layers of ``config.width`` x ``config.height``
    (the first filled with ``config.background``, the rest transparent), loads
    ``config.graphic_names`` through ``loader``, draws a hex per cell and then
    the configured overlays.

    Args:
        cells: Board cells to draw.
        config: Compositor settings.
        loader: Graphics source. Defaults to reading ``config.asset_root``.

    Returns:
        Gui: Compositor whose layers all share one size.
    """
    if loader is None:
        loader = file_loader(config.asset_root, config.none_char)
    layers = {
        name: (
            fill_raster(config.background, config.width, config.height)
            if i == 0
            else blank_raster(config.width, config.height)
        )
        for i, name in enumerate(config.layer_order)
    }
    gui = Gui(
        width=config.width,
        height=config.height,
        layers=pmap(layers),
        layer_order=tuple(config.layer_order),
        graphics=pmap(loader(config.graphic_names)),
        hex_graphic=config.hex_graphic,
        hex_layer=config.hex_layer,
    )
    gui = draw_hexes(gui, cells)
    gui = update_cells(gui, config.overlays)
    logger.debug(
        "initialised %dx%d gui with layers %s", gui.width, gui.height, gui.layer_order
    )
    return gui


def merged(gui: Gui) -> Raster:
    """All layers flattened back to front."""
    return merge_layers(gui.layer_order, gui.layers)


def to_ansi_lines(raster: Raster) -> Tuple[str, ...]:
    """One string per row; absent cells become a plain space."""
    return tuple(
        "".join(" " if c is None else c.ansi() for c in row) for row in raster.grid
    )


def render(gui: Gui, stream: Optional[TextIO] = None) -> None:
    """Print the flattened screen to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    for line in to_ansi_lines(merged(gui)):
        out.write(line)
        out.write("\n")
    out.flush()
