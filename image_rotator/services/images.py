"""Startup scan of the image directory.
Isolated from Flask app for easier unit testing.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

__all__ = [
    'LoadedImage', 'ImageSetError', 'EmptyImageSetError', 'load_image_set'
]


class ImageSetError(Exception):
    """Image set could not be built."""


class EmptyImageSetError(ImageSetError):
    pass


@dataclass(frozen=True)
class LoadedImage:
    name: str
    data: bytes

    def __len__(self) -> int:
        return len(self.data)


def load_image_set(directory: str) -> List[LoadedImage]:
    """Read every non-directory entry of `directory` into memory.

    Entries are sorted by name and that order is the serving order.
    Subdirectories are skipped; dotfiles are not special-cased.
    OSError from listing or reading propagates to the caller.
    """
    images: List[LoadedImage] = []
    for entry in sorted(os.listdir(directory)):
        path = os.path.join(directory, entry)
        if os.path.isdir(path):
            continue
        with open(path, 'rb') as f:
            images.append(LoadedImage(entry, f.read()))
        logger.debug('loaded %s (%d bytes)', entry, len(images[-1]))

    if not images:
        raise EmptyImageSetError(f'no image files found in {directory}')
    logger.info('loaded %d images from %s', len(images), directory)
    return images
