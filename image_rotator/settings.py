"""Centralized settings read from the environment.

Usage:
    from image_rotator.settings import PORT, HOST, IMAGES_DIR, LOG_LEVEL
"""
from __future__ import annotations
import os
from typing import Optional

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(BASE_DIR)

DEFAULT_PORT = 3000
DEFAULT_HOST = '0.0.0.0'
DEFAULT_IMAGES_DIR = os.path.join(BASE_DIR, 'imgs')


def resolve_port(raw: Optional[str]) -> int:
    """Port from a raw env value; falls back to DEFAULT_PORT when unusable."""
    if raw is None:
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        return DEFAULT_PORT
    return port or DEFAULT_PORT


PORT = resolve_port(os.getenv('PORT'))
HOST = os.getenv('HOST') or DEFAULT_HOST
IMAGES_DIR = os.getenv('IMAGES_DIR') or DEFAULT_IMAGES_DIR
LOG_LEVEL = (os.getenv('LOG_LEVEL') or 'INFO').upper()

__all__ = [
    'PORT', 'HOST', 'IMAGES_DIR', 'LOG_LEVEL',
    'DEFAULT_PORT', 'DEFAULT_HOST', 'DEFAULT_IMAGES_DIR',
    'resolve_port', 'BASE_DIR', 'PROJECT_ROOT'
]
