"""Pixel-set algorithms behind the drawing tools.

Every function here returns plain (x, y) coordinates and never touches a
Picture's contents except to read colors for flood fill.
"""
from collections import deque
from math import isqrt
from typing import List, Tuple

from picture import Picture

Point = Tuple[int, int]

NEIGHBORS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _round_ratio(numerator: int, denominator: int) -> int:
    """numerator / denominator rounded half up; denominator must be positive."""
    return (2 * numerator + denominator) // (2 * denominator)


def line_points(start: Point, end: Point) -> List[Point]:
    """
    Cells on the straight segment between ``start`` and ``end``, inclusive.

    The walk steps one unit at a time along the major axis, from the
    endpoint with the smaller coordinate on that axis, and rounds the
    minor coordinate half up. This gives exactly one cell per column for
    shallow lines and one cell per row for steep or vertical ones.
    """
    (x0, y0), (x1, y1) = start, end
    if (x0, y0) == (x1, y1):
        return [(x0, y0)]
    dx, dy = x1 - x0, y1 - y0
    if dx == 0 or abs(dy) > abs(dx):
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
            dx, dy = -dx, -dy
        return [(_round_ratio(x0 * dy + step * dx, dy), y0 + step) for step in range(dy + 1)]
    if x0 > x1:
        x0, y0, x1, y1 = x1, y1, x0, y0
        dx, dy = -dx, -dy
    return [(x0 + step, _round_ratio(y0 * dx + step * dy, dx)) for step in range(dx + 1)]


def rectangle_points(start: Point, end: Point) -> List[Point]:
    """Every cell of the filled box spanned by two opposite corners."""
    min_x, max_x = sorted((start[0], end[0]))
    min_y, max_y = sorted((start[1], end[1]))
    return [(x, y) for y in range(min_y, max_y + 1) for x in range(min_x, max_x + 1)]


def circle_points(center: Point, edge: Point, width: int, height: int) -> List[Point]:
    """Cells of a width x height grid within the distance from ``center`` to ``edge``."""
    cx, cy = center
    r2 = (edge[0] - cx) ** 2 + (edge[1] - cy) ** 2
    r = isqrt(r2)
    points = []
    for y in range(max(0, cy - r), min(height - 1, cy + r) + 1):
        dy2 = (y - cy) ** 2
        for x in range(max(0, cx - r), min(width - 1, cx + r) + 1):
            if (x - cx) ** 2 + dy2 <= r2:
                points.append((x, y))
    return points


def flood_fill_points(picture: Picture, start: Point) -> List[Point]:
    """The 4-connected region sharing the color of ``start``, in visit order."""
    if not picture.contains(*start):
        return []
    target = picture.color_at(*start)
    visited = {start}
    frontier = deque([start])
    region = []
    while frontier:
        x, y = frontier.popleft()
        region.append((x, y))
        for dx, dy in NEIGHBORS:
            nx, ny = x + dx, y + dy
            if (nx, ny) in visited or not picture.contains(nx, ny):
                continue
            visited.add((nx, ny))
            if picture.color_at(nx, ny) == target:
                frontier.append((nx, ny))
    return region
