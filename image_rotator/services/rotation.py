"""Round-robin selection over a loaded image set."""
from __future__ import annotations
import threading
from typing import Sequence, Tuple

from image_rotator.services.images import EmptyImageSetError, LoadedImage

__all__ = ['Rotator']


class Rotator:
    """Owns the rotation counter.

    werkzeug dispatches requests on separate threads, so the
    read-and-increment happens under a lock.
    """

    def __init__(self, images: Sequence[LoadedImage]):
        if not images:
            raise EmptyImageSetError('cannot rotate over an empty image set')
        self._images: Tuple[LoadedImage, ...] = tuple(images)
        self._counter = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._images)

    @property
    def images(self) -> Tuple[LoadedImage, ...]:
        return self._images

    @property
    def served(self) -> int:
        with self._lock:
            return self._counter

    def next_image(self) -> LoadedImage:
        with self._lock:
            index = self._counter % len(self._images)
            self._counter += 1
        return self._images[index]
