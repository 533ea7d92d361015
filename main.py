import logging
import sys
import time
import traceback
from typing import Tuple

from asciimatics.effects import Effect
from asciimatics.event import KeyboardEvent, MouseEvent
from asciimatics.exceptions import ResizeScreenError
from asciimatics.scene import Scene
from asciimatics.screen import Screen

from config import EditorConfig
from editor import PixelEditor
from ui import SaveButton, UIFrame

log = logging.getLogger("pixel_editor")

# One text cell per picture cell.
TERMINAL_SCALE = (1, 1)
MIN_UI_WIDTH = 24

# Levels of the xterm 256-colour RGB cube.
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


# Simple 8-colour mapping from RGB to nearest basic terminal colour index.
def _rgb_to_colour_index(r: int, g: int, b: int) -> int:
    # Threshold values chosen for basic distinction.
    if r > 200 and g > 200 and b > 200:
        return Screen.COLOUR_WHITE
    if r > 200 and g < 100 and b < 100:
        return Screen.COLOUR_RED
    if g > 200 and r < 100 and b < 100:
        return Screen.COLOUR_GREEN
    if b > 200 and r < 100 and g < 100:
        return Screen.COLOUR_BLUE
    if r > 200 and g > 200 and b < 100:
        return Screen.COLOUR_YELLOW
    if r > 200 and b > 200 and g < 100:
        return Screen.COLOUR_MAGENTA
    if g > 200 and b > 200 and r < 100:
        return Screen.COLOUR_CYAN
    return Screen.COLOUR_BLACK


def _cube_index(value: int) -> int:
    return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - value))


def _rgb_to_colour_256(r: int, g: int, b: int) -> int:
    """Nearest xterm-256 index, picking between the RGB cube and the grey ramp."""
    ri, gi, bi = _cube_index(r), _cube_index(g), _cube_index(b)
    cube = (_CUBE_LEVELS[ri], _CUBE_LEVELS[gi], _CUBE_LEVELS[bi])
    grey_step = max(0, min(23, round((r + g + b) / 3 - 8) // 10))
    grey = 8 + grey_step * 10

    def distance(c: Tuple[int, int, int]) -> int:
        return (c[0] - r) ** 2 + (c[1] - g) ** 2 + (c[2] - b) ** 2

    if distance((grey, grey, grey)) < distance(cube):
        return 232 + grey_step
    return 16 + 36 * ri + 6 * gi + bi


def block_render(screen, canvas):
    """Renders the picture canvas to the screen, one full block per cell."""
    to_colour = _rgb_to_colour_256 if screen.colours >= 256 else _rgb_to_colour_index
    picture = canvas.picture
    for y in range(min(picture.height, screen.height)):
        for x in range(min(picture.width, screen.width)):
            colour = to_colour(*canvas.cell_rgb(x, y))
            screen.print_at('█', x, y, colour=colour, bg=colour)


class CanvasEffect(Effect):
    """Asciimatics Effect that renders the editor's canvas using block chars."""

    def __init__(self, screen: Screen, editor: PixelEditor):
        super().__init__(screen)
        self._editor = editor

    def reset(self):
        # Nothing to reset between scene restarts.
        pass

    def stop_frame(self):
        # Run indefinitely; Scene duration is -1.
        return 0

    def _update(self, frame_no):
        block_render(self._screen, self._editor.canvas)


class PointerRouter:
    """
    Turns terminal mouse reports into gesture controller calls.

    Terminals report presses and drags alike as events with the button
    held, so a press is the first such event after a release.
    """

    def __init__(self, editor: PixelEditor, ui_x: int):
        self.editor = editor
        self.ui_x = ui_x
        self.mouse_down = False

    def handle(self, event: MouseEvent, consumed: bool = False) -> None:
        """``consumed`` is True when the side panel swallowed ``event``."""
        gestures = self.editor.gestures
        if consumed:
            # The panel may have eaten the button release.
            if self.mouse_down:
                self.mouse_down = False
                gestures.release()
            return
        if event.buttons & MouseEvent.LEFT_CLICK:
            if self.mouse_down:
                gestures.move(event.x, event.y, event.buttons)
            elif event.x < self.ui_x:
                self.mouse_down = True
                gestures.press(event.x, event.y)
        elif event.buttons == 0:
            self.mouse_down = False
            gestures.move(event.x, event.y, 0)


def main(screen, editor):
    picture = editor.state.picture
    ui_x = min(picture.width + 1, max(screen.width - MIN_UI_WIDTH, 1))
    ui = UIFrame(screen, editor, ui_x)
    editor.set_controls(ui.controls)

    # Build a Scene containing both the canvas effect and the UI frame.
    canvas_effect = CanvasEffect(screen, editor)
    screen.set_scenes([Scene([canvas_effect, ui], duration=-1)])

    pointer = PointerRouter(editor, ui_x)
    while True:
        editor.poll()

        # Event handling ----------------------------------------------------
        raw_event = screen.get_event()

        # Let the UI consume the event first (e.g., button clicks).
        event = ui.process_event(raw_event)

        if isinstance(raw_event, MouseEvent):
            # The UI occupies the columns from `ui_x` rightwards.
            ui.has_focus = raw_event.x >= ui_x
            pointer.handle(raw_event, consumed=event is None)
        elif isinstance(event, KeyboardEvent):
            if event.key_code in (ord('q'), ord('Q')):
                return
            elif event.key_code == Screen.ctrl("s"):
                next(c for c in ui.controls if isinstance(c, SaveButton)).save()
            elif event.key_code == Screen.ctrl("z"):
                editor.undo()

        # ------------------------------------------------------------------
        # Draw the next frame for the Scene (canvas effect + UI).
        screen.draw_next_frame()

        # Cap the frame-rate to ~30 FPS to reduce flicker and CPU usage.
        time.sleep(1 / 30)


def run():
    config = EditorConfig()
    logging.basicConfig(filename=config.log_filename, level=logging.DEBUG,
                        format="%(asctime)s %(message)s", force=True)

    def _excepthook(t, v, tb):
        log.error("".join(traceback.format_exception(t, v, tb)))
        sys.__excepthook__(t, v, tb)
    sys.excepthook = _excepthook
    log.info("Starting")

    editor = PixelEditor(config=config, pointer_scale=TERMINAL_SCALE)
    # Load file from command line: pixel-editor image.png
    if len(sys.argv) > 1:
        editor.load(sys.argv[1])

    while True:
        try:
            Screen.wrapper(main, arguments=[editor])
            sys.exit(0)
        except ResizeScreenError:
            pass


if __name__ == "__main__":
    run()
