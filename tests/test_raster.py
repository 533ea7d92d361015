import pytest

from picture import Picture, Pixel
from raster import circle_points, flood_fill_points, line_points, rectangle_points


def _connected(points):
    return all(
        max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
        for a, b in zip(points, points[1:])
    )


def test_horizontal_line():
    assert line_points((0, 0), (5, 0)) == [(x, 0) for x in range(6)]


def test_diagonal_line():
    points = line_points((0, 0), (3, 3))
    assert points == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert _connected(points)


def test_single_point_line():
    assert line_points((4, 2), (4, 2)) == [(4, 2)]


def test_vertical_line_steps_along_y():
    assert line_points((2, 5), (2, 1)) == [(2, y) for y in range(1, 6)]


def test_steep_line_has_one_cell_per_row():
    points = line_points((0, 0), (2, 7))
    assert [y for _, y in points] == list(range(8))
    assert points[0] == (0, 0) and points[-1] == (2, 7)
    assert _connected(points)


def test_shallow_line_has_one_cell_per_column():
    points = line_points((9, 4), (0, 0))
    assert [x for x, _ in points] == list(range(10))
    assert _connected(points)


def test_ties_round_half_up():
    assert line_points((0, 0), (2, 1)) == [(0, 0), (1, 1), (2, 1)]
    assert line_points((0, 2), (4, 0)) == [(0, 2), (1, 2), (2, 1), (3, 1), (4, 0)]


def test_line_direction_does_not_matter():
    assert set(line_points((1, 7), (6, 2))) == set(line_points((6, 2), (1, 7)))


def test_rectangle_is_inclusive_and_normalised():
    expected = {(x, y) for x in range(2, 5) for y in range(2, 6)}
    for start, end in [((2, 2), (4, 5)), ((4, 5), (2, 2)), ((2, 5), (4, 2)), ((4, 2), (2, 5))]:
        points = rectangle_points(start, end)
        assert len(points) == 12
        assert set(points) == expected


def test_circle_of_radius_zero_is_its_center():
    assert circle_points((3, 3), (3, 3), 8, 8) == [(3, 3)]


def test_circle_uses_euclidean_radius():
    points = set(circle_points((3, 3), (3, 5), 8, 8))
    assert (3, 1) in points and (5, 3) in points and (3, 5) in points
    # sqrt(2*2 + 1*1) > 2
    assert (5, 4) not in points
    assert (4, 4) in points
    assert len(points) == 13


def test_circle_is_clipped_to_grid():
    points = circle_points((0, 0), (2, 0), 3, 3)
    assert all(0 <= x < 3 and 0 <= y < 3 for x, y in points)
    assert set(points) == {(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (0, 2)}


def test_flood_fill_covers_uniform_grid():
    picture = Picture.create(7, 5, "#ffffff")
    points = flood_fill_points(picture, (3, 2))
    assert len(points) == 35
    assert len(set(points)) == 35


def test_flood_fill_stops_at_other_colors():
    wall = [Pixel(2, y, "#000000") for y in range(4)]
    picture = Picture.create(5, 4, "#ffffff").update(wall)
    points = set(flood_fill_points(picture, (0, 0)))
    assert points == {(x, y) for x in range(2) for y in range(4)}


def test_flood_fill_is_four_connected():
    picture = Picture.create(3, 3, "#ffffff").update([
        Pixel(1, 0, "#000000"), Pixel(0, 1, "#000000"),
    ])
    assert flood_fill_points(picture, (0, 0)) == [(0, 0)]


def test_flood_fill_outside_grid_is_empty():
    assert flood_fill_points(Picture.create(2, 2, "#ffffff"), (5, 0)) == []
