"""The editor: current state, dispatch, and re-sync of everything that displays it."""
import logging
from typing import Optional

from canvas import PictureCanvas
from config import EditorConfig
from gesture import GestureController
from picture_io import PictureLoader, save_picture
from state import AppState, apply_update, initial_state, now_ms
from tools import TOOLS

log = logging.getLogger("pixel_editor")


class PixelEditor:
    def __init__(self, state: Optional[AppState] = None, config: Optional[EditorConfig] = None,
                 tools=None, controls=(), pointer_scale=None, clock=now_ms):
        self.config = config or EditorConfig()
        self.state = state or initial_state(self.config)
        self.tools = tools if tools is not None else TOOLS
        self.clock = clock
        self.status = ""
        self.canvas = PictureCanvas(self.state.picture, self.config.scale)
        self.gestures = GestureController(
            self.tools,
            lambda: self.state,
            self.dispatch,
            scale=pointer_scale if pointer_scale is not None else self.config.scale,
        )
        self.loader = PictureLoader()
        self.controls = list(controls)

    def dispatch(self, partial):
        tool = partial.get("tool")
        if tool is not None:
            if tool not in self.tools:
                raise ValueError(f"Unknown tool: {tool}")
            log.info(f"[tool] {tool}")
        self.state = apply_update(
            self.state,
            partial,
            now=self.clock(),
            coalesce_ms=self.config.coalesce_ms,
            history_limit=self.config.history_limit,
        )
        self.sync()

    def sync(self):
        self.canvas.sync(self.state.picture)
        for control in self.controls:
            control.sync(self.state)

    def set_controls(self, controls):
        self.controls = list(controls)
        self.sync()

    def report(self, message):
        """Shows ``message`` on the status control at the next sync."""
        self.status = message

    def undo(self):
        self.dispatch({"undo": True})

    def save(self, path=None):
        path = path or self.config.export_filename
        log.info(f"[save] Saving to {path}")
        save_picture(self.state.picture, path)
        return path

    def load(self, path):
        thread = self.loader.request(path)
        self.report(f"Loading {path}...")
        return thread

    def poll(self):
        """Applies the outcome of the latest finished load, if any."""
        for result in self.loader.drain():
            if result.error is not None:
                log.error(f"[load] {result.error}")
                self.report(str(result.error))
                self.sync()
            else:
                picture = result.picture
                log.info(f"[load] OK: {result.path} {picture.width}x{picture.height}")
                self.report(f"Loaded {result.path}")
                self.dispatch({"picture": picture})
