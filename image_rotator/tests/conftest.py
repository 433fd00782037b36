import os
import socket
import sys

import pytest

# Ensure package importable when running tests from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(os.path.dirname(BASE_DIR))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from image_rotator.app import create_app  # noqa: E402


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]


@pytest.fixture
def make_images_dir(tmp_path):
    """Factory: write {name: bytes} into a fresh directory and return its path."""
    counter = {'n': 0}

    def _make(files):
        counter['n'] += 1
        d = tmp_path / f'imgs{counter["n"]}'
        d.mkdir()
        for name, data in files.items():
            (d / name).write_bytes(data)
        return str(d)
    return _make


@pytest.fixture
def two_images_dir(make_images_dir):
    return make_images_dir({'a.jpg': b'\xff\xd8AAAA', 'b.jpg': b'\xff\xd8BBBBBBBB'})


@pytest.fixture
def client(two_images_dir):  # type: ignore
    app = create_app(two_images_dir)
    app.testing = True
    with app.test_client() as c:
        yield c
