"""Reading and writing pictures as image files."""
import logging
import queue
import threading
from typing import List, NamedTuple, Optional

import numpy as np
from PIL import Image

from errors import LoadFailure
from picture import Picture

log = logging.getLogger("pixel_editor")


def picture_from_image(image: Image.Image) -> Picture:
    """One cell per image pixel, colored by its RGB channels."""
    return Picture.from_array(np.asarray(image.convert("RGBA")))


def load_picture(path) -> Picture:
    try:
        with Image.open(path) as image:
            return picture_from_image(image)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise LoadFailure(path, exc) from exc


def save_picture(picture: Picture, path) -> None:
    """Writes ``picture`` at one pixel per cell; the format follows the file extension."""
    Image.fromarray(picture.to_array()).save(path)


class LoadResult(NamedTuple):
    request_id: int
    path: str
    picture: Optional[Picture]
    error: Optional[LoadFailure]


class PictureLoader:
    """
    Loads image files on background threads.

    Every request gets a new id. Finished loads are queued until the owner
    calls ``drain`` on its own thread, which returns the result of the most
    recent request only; older requests that finish late are dropped.
    """

    def __init__(self):
        self._results = queue.Queue()
        self.latest_id = 0

    def request(self, path) -> threading.Thread:
        self.latest_id += 1
        log.info(f"[load] request {self.latest_id}: {path}")
        thread = threading.Thread(target=self._load, args=(self.latest_id, path), daemon=True)
        thread.start()
        return thread

    def _load(self, request_id, path):
        try:
            picture = load_picture(path)
        except LoadFailure as exc:
            self._results.put(LoadResult(request_id, path, None, exc))
        except Exception as exc:
            log.error(f"[load] request {request_id} crashed: {exc}", exc_info=True)
            self._results.put(LoadResult(request_id, path, None, LoadFailure(path, exc)))
        else:
            self._results.put(LoadResult(request_id, path, picture, None))

    def drain(self) -> List[LoadResult]:
        results = []
        while True:
            try:
                result = self._results.get_nowait()
            except queue.Empty:
                break
            if result.request_id != self.latest_id:
                log.info(f"[load] dropping stale request {result.request_id}: {result.path}")
                continue
            results.append(result)
        return results
