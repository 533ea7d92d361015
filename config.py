from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class EditorConfig:
    width: int = 60
    height: int = 30
    background: str = "#f0f0f0"
    color: str = "#000000"
    tool: str = "paint"
    # Display pixels per grid cell on the rendering surface.
    scale: int = 10
    coalesce_ms: int = 1000
    # None keeps every history entry.
    history_limit: Optional[int] = 50
    export_filename: str = "artwork.png"
    log_filename: str = "pixel_editor.log"
    palette: List[Tuple[str, str]] = field(
        default_factory=lambda: [
            ("Black", "#000000"),
            ("White", "#ffffff"),
            ("Red", "#ff0000"),
            ("Green", "#00ff00"),
            ("Blue", "#0000ff"),
            ("Yellow", "#ffff00"),
            ("Cyan", "#00ffff"),
            ("Magenta", "#ff00ff"),
        ]
    )
