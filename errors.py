"""Exceptions raised by the pixel editor core."""


class PixelEditorError(Exception):
    """Base class for every error the editor raises on purpose."""


class InvalidDimension(PixelEditorError, ValueError):
    """A picture was requested with a non-positive width or height."""

    def __init__(self, width, height):
        super().__init__(f"Picture dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(PixelEditorError, IndexError):
    """A coordinate fell outside the picture grid."""

    def __init__(self, x, y, width, height):
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class LoadFailure(PixelEditorError):
    """An image file could not be read or decoded."""

    def __init__(self, path, reason):
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason
