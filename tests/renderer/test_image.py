import numpy as np

from photosynthesis.renderer.color import COLOR_RGB, Color
from photosynthesis.renderer.image import BACKGROUND_RGBA, raster_to_image
from photosynthesis.renderer.raster import NULL_RASTER, blank_raster
from tests.test_utils import make_raster


def test_image_size_follows_raster() -> None:
    img = raster_to_image(make_raster(["abc", "d"]), cell_size=10)
    assert img.size == (30, 20)
    assert img.mode == "RGBA"


def test_transparent_cells_stay_background() -> None:
    img = raster_to_image(blank_raster(2, 2), cell_size=4)
    arr = np.array(img)
    assert (arr == np.array(BACKGROUND_RGBA, dtype=np.uint8)).all()


def test_drawn_cells_are_tinted() -> None:
    img = raster_to_image(make_raster([" x"], Color.RED), cell_size=8)
    arr = np.array(img)
    assert tuple(arr[0, 0]) == BACKGROUND_RGBA
    corner = arr[7, 15]
    assert corner[0] > corner[1] and corner[0] > corner[2]
    assert COLOR_RGB[Color.RED][0] > 0


def test_null_raster_gives_empty_image() -> None:
    img = raster_to_image(NULL_RASTER)
    assert img.size == (0, 0)
