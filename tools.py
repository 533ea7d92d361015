"""
Drawing tools.

A tool is started once per gesture with the position under the pointer and
the application state at that instant. It dispatches its first update
right away and returns a ``Gesture`` when it wants to follow the pointer,
or ``None`` for one-shot tools. Each later pointer move is handed to
``Tool.move`` together with the gesture and the live state.
"""
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, NamedTuple, Optional

from picture import Picture, Pixel
from raster import circle_points, flood_fill_points, line_points, rectangle_points
from state import AppState

Dispatch = Callable[[dict], None]


class Position(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Gesture:
    """One pointer-down-to-pointer-up session of a tool."""
    tool: "Tool"
    # Application state when the gesture began.
    state: AppState
    start: Position
    # Last position the tool drew to.
    anchor: Position


def _draw(picture: Picture, points: Iterable, color: str, dispatch: Dispatch) -> None:
    """Dispatch ``picture`` with ``points`` painted, dropping cells outside the grid."""
    pixels = [Pixel(x, y, color) for x, y in points if picture.contains(x, y)]
    if pixels:
        dispatch({"picture": picture.update(pixels)})


class Tool:
    name = ""

    def start(self, position: Position, state: AppState, dispatch: Dispatch) -> Optional[Gesture]:
        raise NotImplementedError

    def move(self, gesture: Gesture, position: Position, state: AppState, dispatch: Dispatch) -> Gesture:
        return replace(gesture, anchor=position)


class PaintTool(Tool):
    """Freehand drawing; fast pointer moves are joined with straight segments."""
    name = "paint"

    def start(self, position, state, dispatch):
        _draw(state.picture, [position], state.color, dispatch)
        return Gesture(self, state, position, position)

    def move(self, gesture, position, state, dispatch):
        anchor = gesture.anchor
        if abs(position.x - anchor.x) <= 1 and abs(position.y - anchor.y) <= 1:
            points = [position]
        else:
            points = line_points(anchor, position)
        # Strokes accumulate on the live picture.
        _draw(state.picture, points, gesture.state.color, dispatch)
        return replace(gesture, anchor=position)


class LineTool(Tool):
    name = "line"

    def start(self, position, state, dispatch):
        _draw(state.picture, [position], state.color, dispatch)
        return Gesture(self, state, position, position)

    def move(self, gesture, position, state, dispatch):
        frozen = gesture.state
        _draw(frozen.picture, line_points(gesture.start, position), frozen.color, dispatch)
        return replace(gesture, anchor=position)


class RectangleTool(Tool):
    name = "rectangle"

    def start(self, position, state, dispatch):
        _draw(state.picture, rectangle_points(position, position), state.color, dispatch)
        return Gesture(self, state, position, position)

    def move(self, gesture, position, state, dispatch):
        frozen = gesture.state
        _draw(frozen.picture, rectangle_points(gesture.start, position), frozen.color, dispatch)
        return replace(gesture, anchor=position)


class CircleTool(Tool):
    name = "circle"

    def start(self, position, state, dispatch):
        picture = state.picture
        _draw(picture, circle_points(position, position, picture.width, picture.height), state.color, dispatch)
        return Gesture(self, state, position, position)

    def move(self, gesture, position, state, dispatch):
        frozen = gesture.state
        picture = frozen.picture
        points = circle_points(gesture.start, position, picture.width, picture.height)
        _draw(picture, points, frozen.color, dispatch)
        return replace(gesture, anchor=position)


class FloodFillTool(Tool):
    name = "flood_fill"

    def start(self, position, state, dispatch):
        _draw(state.picture, flood_fill_points(state.picture, position), state.color, dispatch)
        return None


class PickColorTool(Tool):
    name = "pick_color"

    def start(self, position, state, dispatch):
        if state.picture.contains(*position):
            dispatch({"color": state.picture.color_at(*position)})
        return None


TOOLS: Dict[str, Tool] = {
    tool.name: tool
    for tool in (PaintTool(), LineTool(), RectangleTool(), CircleTool(), FloodFillTool(), PickColorTool())
}
