"""Immutable picture model: a fixed-size grid of ``#rrggbb`` colors."""
import re
from functools import lru_cache
from typing import Iterable, List, NamedTuple, Tuple

import numpy as np

from errors import InvalidDimension, OutOfBounds

COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")
# "#rrggbb" is always seven characters.
CELL_DTYPE = "<U7"


@lru_cache(maxsize=512)
def normalize_color(value: str) -> str:
    """Return ``value`` as a lowercase ``#rrggbb`` string."""
    if not isinstance(value, str) or COLOR_RE.fullmatch(value) is None:
        raise ValueError(f"Not a #rrggbb color: {value!r}")
    return value.lower()


def color_to_rgb(color: str) -> Tuple[int, int, int]:
    color = normalize_color(color)
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def rgb_to_color(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


class Pixel(NamedTuple):
    """A single cell edit."""
    x: int
    y: int
    color: str


class Picture:
    """
    A width x height grid of colors addressed row-major by (x, y).

    Pictures never change after construction. ``update`` copies the
    underlying buffer, so a Picture can be shared freely between the live
    state and the undo history.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Expected a 2D cell array, got shape {cells.shape}")
        if 0 in cells.shape:
            raise InvalidDimension(cells.shape[1], cells.shape[0])
        cells.setflags(write=False)
        self._cells = cells

    @classmethod
    def create(cls, width: int, height: int, color: str) -> "Picture":
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        return cls(np.full((height, width), normalize_color(color), dtype=CELL_DTYPE))

    @classmethod
    def from_array(cls, array) -> "Picture":
        """Build a Picture from an (height, width, 3 or 4) array; alpha is ignored."""
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (h, w, 3|4) array, got shape {array.shape}")
        height, width = array.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        rgb = array[:, :, :3].astype(np.uint8).reshape(-1, 3).tolist()
        colors = [rgb_to_color(r, g, b) for r, g, b in rgb]
        return cls(np.array(colors, dtype=CELL_DTYPE).reshape(height, width))

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def grid(self) -> Tuple[str, ...]:
        return tuple(self._cells.ravel().tolist())

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def color_at(self, x: int, y: int) -> str:
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return str(self._cells[y, x])

    def update(self, pixels: Iterable[Pixel]) -> "Picture":
        """Return a new Picture with ``pixels`` written over this one."""
        pixels = list(pixels)
        if not pixels:
            return self
        cells = self._cells.copy()
        for x, y, color in pixels:
            if not self.contains(x, y):
                raise OutOfBounds(x, y, self.width, self.height)
            cells[y, x] = normalize_color(color)
        return Picture(cells)

    def difference(self, other: "Picture") -> List[Tuple[int, int]]:
        """Cells whose color differs from ``other``; both must share dimensions."""
        if self._cells.shape != other._cells.shape:
            raise ValueError("Cannot diff pictures of different dimensions")
        return [(int(x), int(y)) for y, x in np.argwhere(self._cells != other._cells)]

    def to_array(self) -> np.ndarray:
        """The picture as an (height, width, 3) uint8 RGB array."""
        hex_digits = "".join(color[1:] for color in self._cells.ravel().tolist())
        rgb = np.frombuffer(bytes.fromhex(hex_digits), dtype=np.uint8)
        return rgb.reshape(self.height, self.width, 3).copy()

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        return hash((self.width, self.height, self._cells.tobytes()))

    def __repr__(self):
        return f"Picture({self.width}x{self.height})"
