import pytest

from photosynthesis.errors import DrawOutOfBounds, LayerNotFound, LayerSizeMismatch
from photosynthesis.renderer.color import Color, ColorChar
from photosynthesis.renderer.raster import (
    NULL_RASTER,
    blank_raster,
    draw,
    fill_raster,
    merge_layers,
    merge_two_layers,
    presence_mask,
    raster_of_grid,
)
from tests.test_utils import glyphs, make_raster

DOT = ColorChar(".", Color.MAGENTA)


def test_fill_raster() -> None:
    raster = fill_raster(DOT, 3, 2)
    assert (raster.width, raster.height) == (3, 2)
    assert raster.grid == ((DOT, DOT, DOT), (DOT, DOT, DOT))


def test_blank_raster_is_transparent() -> None:
    raster = blank_raster(4, 2)
    assert all(cell is None for row in raster.grid for cell in row)
    assert (raster.width, raster.height) == (4, 2)


def test_null_raster_is_empty() -> None:
    assert NULL_RASTER.grid == ()
    assert (NULL_RASTER.width, NULL_RASTER.height) == (0, 0)


def test_raster_of_grid_keeps_jagged_rows() -> None:
    a = ColorChar("a", Color.RED)
    grid = ((a,), (None, a, a), ())
    raster = raster_of_grid(grid)
    assert raster.grid == grid
    assert raster.width == 3
    assert raster.height == 3


def test_raster_of_grid_accepts_lists() -> None:
    a = ColorChar("a")
    raster = raster_of_grid([[a, None], [a]])
    assert raster.grid == ((a, None), (a,))


def test_draw_places_source_at_offset() -> None:
    target = make_raster(["....", "....", "...."])
    source = make_raster(["ab", "cd"])
    result = draw(target, source, 1, 1)
    assert glyphs(result) == ("....", ".ab.", ".cd.")
    assert (result.width, result.height) == (4, 3)


def test_draw_transparent_source_cells_show_target() -> None:
    target = make_raster(["...", "..."])
    source = make_raster(["x x", " x"])
    assert glyphs(draw(target, source, 0, 0)) == ("x.x", ".x.")


@pytest.mark.parametrize("x, y", [(0, 0), (1, 1), (2, 0), (0, 2), (2, 2)])
def test_draw_fully_transparent_source_is_identity(x: int, y: int) -> None:
    target = make_raster(["abcd", "efgh", "ijkl", "mnop"])
    assert draw(target, blank_raster(2, 2), x, y) == target


def test_draw_jagged_source() -> None:
    target = make_raster(["....", "....", "...."])
    source = make_raster(["  _", " / \\", "/"])
    assert glyphs(draw(target, source, 0, 0)) == (".._.", "./.\\", "/...")


def test_draw_does_not_modify_target() -> None:
    target = make_raster(["...."])
    draw(target, make_raster(["x"]), 0, 0)
    assert glyphs(target) == ("....",)


@pytest.mark.parametrize(
    "x, y",
    [
        (3, 0),  # too wide
        (0, 2),  # too tall
        (-1, 0),
        (0, -1),
    ],
)
def test_draw_out_of_bounds_fails(x: int, y: int) -> None:
    target = make_raster(["....", "....", "...."])
    source = make_raster(["ab", "cd"])
    with pytest.raises(DrawOutOfBounds):
        draw(target, source, x, y)


def test_draw_exactly_to_the_edge() -> None:
    target = make_raster(["...", "..."])
    result = draw(target, make_raster(["ab"]), 1, 1)
    assert glyphs(result) == ("...", ".ab")


def test_merge_two_layers() -> None:
    under = make_raster(["abc", "def"])
    over = make_raster([" X ", "  Y"])
    assert glyphs(merge_two_layers(under, over)) == ("aXc", "deY")


def test_merge_two_layers_size_mismatch_fails() -> None:
    with pytest.raises(LayerSizeMismatch):
        merge_two_layers(blank_raster(3, 2), blank_raster(2, 2))
    with pytest.raises(LayerSizeMismatch):
        merge_two_layers(blank_raster(3, 2), blank_raster(3, 3))


def test_merge_layers_back_to_front() -> None:
    layers = {
        "back": make_raster(["...", "..."]),
        "middle": make_raster(["a  ", " a "]),
        "front": make_raster(["  b", " b "]),
    }
    result = merge_layers(["back", "middle", "front"], layers)
    assert glyphs(result) == ("a.b", ".b.")
    reversed_result = merge_layers(["front", "middle", "back"], layers)
    assert glyphs(reversed_result) == ("...", "...")


def test_merge_layers_empty_order_is_null() -> None:
    assert merge_layers([], {"a": blank_raster(2, 2)}) == NULL_RASTER


def test_merge_layers_single_layer() -> None:
    layer = make_raster(["ab"])
    assert merge_layers(["only"], {"only": layer}) == layer


def test_merge_layers_missing_name_fails() -> None:
    with pytest.raises(LayerNotFound):
        merge_layers(["missing"], {})


def test_merge_layers_is_associative() -> None:
    a = make_raster(["abc", "def"])
    b = make_raster([" x ", "x  "])
    c = make_raster(["  y", "y y"])
    left = merge_layers(["a", "b", "c"], {"a": a, "b": b, "c": c})
    bc = merge_two_layers(b, c)
    right = merge_layers(["a", "bc"], {"a": a, "bc": bc})
    assert left == right


def test_presence_mask() -> None:
    raster = make_raster(["a b", "c"])
    mask = presence_mask(raster)
    assert mask.shape == (2, 3)
    assert mask.tolist() == [[True, False, True], [True, False, False]]


def test_cell_past_short_row_is_none() -> None:
    raster = make_raster(["abc", "d"])
    assert raster.cell(2, 1) is None
    assert raster.cell(0, 1) == ColorChar("d", Color.WHITE)
