"""Application state and the reducer that maintains the undo history."""
import logging
import time
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from config import EditorConfig
from picture import Picture, normalize_color

log = logging.getLogger("pixel_editor")

UPDATE_KEYS = frozenset(("tool", "color", "picture", "undo"))


@dataclass(frozen=True)
class AppState:
    tool: str
    color: str
    picture: Picture
    # Undo stack, most recent last.
    history: Tuple[Picture, ...] = ()
    # Wall clock in ms of the last history push; 0 forces the next push.
    last_save: int = 0


def now_ms() -> int:
    return int(time.time() * 1000)


def initial_state(config: EditorConfig) -> AppState:
    return AppState(
        tool=config.tool,
        color=normalize_color(config.color),
        picture=Picture.create(config.width, config.height, config.background),
    )


def apply_update(
    state: AppState,
    partial: Mapping,
    now: Optional[int] = None,
    coalesce_ms: int = 1000,
    history_limit: Optional[int] = None,
) -> AppState:
    """
    Merge ``partial`` into ``state`` and return the resulting state.

    ``partial`` may carry ``tool``, ``color``, ``picture`` and ``undo``.
    An undo pops the newest history entry into ``picture``; with an empty
    history it returns ``state`` itself. A new picture pushes the current
    one onto the history only when at least ``coalesce_ms`` passed since
    the previous push, so a burst of edits becomes a single undo step.
    ``history_limit`` drops the oldest entries beyond that many.
    """
    unknown = set(partial) - UPDATE_KEYS
    if unknown:
        raise ValueError(f"Unknown state fields: {', '.join(sorted(unknown))}")
    changes = {key: value for key, value in partial.items() if key != "undo"}
    if "color" in changes:
        changes["color"] = normalize_color(changes["color"])
    if "picture" in changes and not isinstance(changes["picture"], Picture):
        raise TypeError(f"picture must be a Picture, got {type(changes['picture']).__name__}")

    if partial.get("undo"):
        if not state.history:
            return state
        log.debug(f"[undo] restoring entry {len(state.history)}")
        changes.update(picture=state.history[-1], history=state.history[:-1], last_save=0)
        return replace(state, **changes)

    if now is None:
        now = now_ms()
    if "picture" in changes and now - state.last_save >= coalesce_ms:
        history = state.history + (state.picture,)
        if history_limit is not None and len(history) > history_limit:
            history = history[len(history) - history_limit:]
        changes.update(history=history, last_save=now)
    return replace(state, **changes)
