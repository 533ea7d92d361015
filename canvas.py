import numpy as np

from picture import Picture

# Display pixels per picture cell.
SCALE = 10


def draw_picture(picture, surface, previous=None, scale=SCALE):
    """
    Paints ``picture`` onto ``surface`` and returns the cells it touched.

    Only the cells that differ from ``previous`` are painted. Every cell is
    painted when there is no previous picture or its size differs.
    """
    if previous is None or (previous.width, previous.height) != (picture.width, picture.height):
        cells = [(x, y) for y in range(picture.height) for x in range(picture.width)]
    else:
        cells = picture.difference(previous)
    if not cells:
        return cells
    rgb = picture.to_array()
    for x, y in cells:
        surface[y * scale:(y + 1) * scale, x * scale:(x + 1) * scale] = rgb[y, x]
    return cells


class PictureCanvas:
    """
    Keeps an RGB pixel surface in step with the current picture.
    """
    def __init__(self, picture: Picture, scale: int = SCALE):
        self.scale = scale
        self.picture = None
        self.surface = np.zeros((0, 0, 3), dtype=np.uint8)
        self.sync(picture)

    def sync(self, picture):
        """Redraws the cells that changed since the last sync."""
        if picture is self.picture:
            return []
        previous = self.picture
        if previous is None or (previous.width, previous.height) != (picture.width, picture.height):
            self.surface = np.zeros((picture.height * self.scale, picture.width * self.scale, 3), dtype=np.uint8)
            previous = None
        changed = draw_picture(picture, self.surface, previous, self.scale)
        self.picture = picture
        return changed

    def cell_rgb(self, x, y):
        """The displayed color of a cell, read back from the surface."""
        r, g, b = self.surface[y * self.scale, x * self.scale]
        return int(r), int(g), int(b)
