import logging
import math

from canvas import SCALE
from tools import Position

log = logging.getLogger("pixel_editor")

PRIMARY_BUTTON = 0


def to_position(device_x, device_y, scale=SCALE) -> Position:
    """
    Grid cell under a device coordinate.

    ``scale`` is either one factor for both axes or an (x, y) pair.
    Negative results are clamped to 0; there is no upper clamp.
    """
    scale_x, scale_y = scale if isinstance(scale, tuple) else (scale, scale)
    return Position(max(0, math.floor(device_x / scale_x)), max(0, math.floor(device_y / scale_y)))


class GestureController:
    """
    Routes pointer input to the active tool.

    A primary-button press starts the tool with the current state. If the
    tool returns a gesture, later moves with a button held continue it,
    and the first move with no button held ends it.
    """

    def __init__(self, tools, get_state, dispatch, scale=SCALE):
        self.tools = tools
        self.get_state = get_state
        self.dispatch = dispatch
        self.scale = scale
        self.gesture = None
        self.position = None

    @property
    def dragging(self) -> bool:
        return self.gesture is not None

    def press(self, device_x, device_y, button=PRIMARY_BUTTON):
        if button != PRIMARY_BUTTON:
            return
        position = to_position(device_x, device_y, self.scale)
        state = self.get_state()
        tool = self.tools[state.tool]
        log.debug(f"[gesture] {tool.name} at {position}")
        self.position = position
        self.gesture = tool.start(position, state, self.dispatch)

    def move(self, device_x, device_y, buttons):
        if self.gesture is None:
            return
        if not buttons:
            self.release()
            return
        position = to_position(device_x, device_y, self.scale)
        if position == self.position:
            return
        self.position = position
        self.gesture = self.gesture.tool.move(self.gesture, position, self.get_state(), self.dispatch)

    def release(self):
        self.gesture = None
        self.position = None
