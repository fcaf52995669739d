"""Rasters: rectangular-ish grids of optional coloured characters.

A raster row is a tuple of ``Optional[ColorChar]``; ``None`` is a transparent
cell. Rows loaded from asset files keep their natural lengths, so a raster
may be jagged: ``width`` is the longest row and only an upper bound.

Drawing and merging follow one transparency rule: a present cell on top
replaces the cell beneath, a ``None`` cell on top leaves it alone. Every
function returns a new raster.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from photosynthesis.errors import DrawOutOfBounds, LayerNotFound, LayerSizeMismatch
from photosynthesis.renderer.color import ColorChar

Pixel = Optional[ColorChar]
Row = Tuple[Pixel, ...]
Grid = Tuple[Row, ...]
BoolArray = npt.NDArray[np.bool_]


@dataclass(frozen=True)
class Raster:
    """Immutable character grid.

    Attributes:
        grid: Rows of cells, top to bottom. Rows may differ in length.
        width: Length of the longest row.
        height: Number of rows.
    """

    grid: Grid
    width: int
    height: int

    def cell(self, x: int, y: int) -> Pixel:
        """Cell at column ``x`` of row ``y``; ``None`` past a short row."""
        row = self.grid[y]
        return row[x] if x < len(row) else None


def fill_raster(value: Pixel, width: int, height: int) -> Raster:
    """Raster of ``width`` x ``height`` with every cell set to ``value``."""
    row: Row = tuple(value for _ in range(width))
    return Raster(grid=tuple(row for _ in range(height)), width=width, height=height)


def blank_raster(width: int, height: int) -> Raster:
    """Fully transparent raster."""
    return fill_raster(None, width, height)


NULL_RASTER = blank_raster(0, 0)


def raster_of_grid(grid: Sequence[Sequence[Pixel]]) -> Raster:
    """Wrap ``grid`` without padding its rows.

    Height is the number of rows and width the length of the longest row.
    """
    frozen: Grid = tuple(tuple(row) for row in grid)
    width = max((len(row) for row in frozen), default=0)
    return Raster(grid=frozen, width=width, height=len(frozen))


def _overlay_row(under: Row, over: Row, offset: int) -> Row:
    if not over:
        return under
    end = offset + len(over)
    if end > len(under):
        raise DrawOutOfBounds(
            f"row of length {len(over)} at x={offset} exceeds target row of length {len(under)}"
        )
    middle = tuple(
        below if above is None else above
        for below, above in zip(under[offset:end], over)
    )
    return under[:offset] + middle + under[end:]


def draw(target: Raster, source: Raster, x: int, y: int) -> Raster:
    """Overlay ``source`` onto ``target`` with its top-left corner at ``(x, y)``.

    Transparent source cells leave the target visible. The result keeps the
    target's dimensions.

    Args:
        target: Raster drawn onto.
        source: Raster drawn; may be jagged.
        x: Column offset.
        y: Row offset.

    Returns:
        Raster: Copy of ``target`` with ``source`` drawn in.

    Raises:
        DrawOutOfBounds: Any part of ``source`` would land outside ``target``.
    """
    if x < 0 or y < 0:
        raise DrawOutOfBounds(f"negative offset ({x}, {y})")
    if y + source.height > target.height:
        raise DrawOutOfBounds(
            f"{source.height} rows at y={y} exceed target height {target.height}"
        )
    rows = list(target.grid)
    for i, source_row in enumerate(source.grid):
        rows[y + i] = _overlay_row(rows[y + i], source_row, x)
    return Raster(grid=tuple(rows), width=target.width, height=target.height)


def merge_two_layers(under: Raster, over: Raster) -> Raster:
    """Composite ``over`` on top of ``under``; both must share one shape.

    Raises:
        LayerSizeMismatch: Row counts or any row length differ.
    """
    if len(under.grid) != len(over.grid) or any(
        len(u) != len(o) for u, o in zip(under.grid, over.grid)
    ):
        raise LayerSizeMismatch(
            f"cannot merge {over.width}x{over.height} onto {under.width}x{under.height}"
        )
    grid: Grid = tuple(
        tuple(u if o is None else o for u, o in zip(under_row, over_row))
        for under_row, over_row in zip(under.grid, over.grid)
    )
    return Raster(grid=grid, width=under.width, height=under.height)


def merge_layers(layer_order: Sequence[str], layers: Mapping[str, Raster]) -> Raster:
    """Flatten ``layers`` back to front in ``layer_order``.

    An empty order yields :data:`NULL_RASTER`.

    Raises:
        LayerNotFound: A name in ``layer_order`` has no raster.
        LayerSizeMismatch: Layers differ in shape.
    """
    result: Optional[Raster] = None
    for name in layer_order:
        if name not in layers:
            raise LayerNotFound(name)
        layer = layers[name]
        result = layer if result is None else merge_two_layers(result, layer)
    return NULL_RASTER if result is None else result


def presence_mask(raster: Raster) -> BoolArray:
    """Boolean ``height x width`` array, True where a cell is drawn.

    Cells past the end of a short row are False.
    """
    mask: BoolArray = np.zeros((raster.height, raster.width), dtype=np.bool_)
    for y, row in enumerate(raster.grid):
        for x, cell in enumerate(row):
            if cell is not None:
                mask[y, x] = True
    return mask
