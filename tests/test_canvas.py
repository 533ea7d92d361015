import numpy as np

from canvas import SCALE, PictureCanvas, draw_picture
from picture import Picture, Pixel


def test_first_sync_draws_every_cell():
    picture = Picture.create(3, 2, "#ff0000")
    canvas = PictureCanvas(picture)
    assert canvas.surface.shape == (2 * SCALE, 3 * SCALE, 3)
    assert np.all(canvas.surface == [255, 0, 0])
    assert canvas.cell_rgb(2, 1) == (255, 0, 0)


def test_sync_same_picture_draws_nothing():
    picture = Picture.create(3, 2, "#ff0000")
    canvas = PictureCanvas(picture)
    assert canvas.sync(picture) == []


def test_sync_draws_only_changed_cells():
    picture = Picture.create(4, 4, "#ffffff")
    canvas = PictureCanvas(picture, scale=2)
    changed = canvas.sync(picture.update([Pixel(1, 2, "#0000ff")]))
    assert changed == [(1, 2)]
    np.testing.assert_array_equal(canvas.surface[4:6, 2:4], np.full((2, 2, 3), [0, 0, 255]))
    assert canvas.cell_rgb(0, 0) == (255, 255, 255)


def test_equal_but_distinct_picture_draws_nothing():
    canvas = PictureCanvas(Picture.create(2, 2, "#ffffff"))
    assert canvas.sync(Picture.create(2, 2, "#ffffff")) == []


def test_dimension_change_resizes_and_redraws():
    canvas = PictureCanvas(Picture.create(2, 2, "#ffffff"), scale=3)
    changed = canvas.sync(Picture.create(5, 1, "#ffffff"))
    assert len(changed) == 5
    assert canvas.surface.shape == (3, 15, 3)


def test_draw_picture_without_previous_visits_all():
    picture = Picture.create(2, 3, "#102030")
    surface = np.zeros((3, 2, 3), dtype=np.uint8)
    cells = draw_picture(picture, surface, scale=1)
    assert sorted(cells) == [(x, y) for x in range(2) for y in range(3)]
    np.testing.assert_array_equal(surface, picture.to_array())
