#!/usr/bin/env python3
"""Application entrypoint.

Builds the Flask app over a preloaded image set and runs it on a
werkzeug server until SIGINT or SIGTERM.
"""
from __future__ import annotations
import errno
import logging
import socket
from typing import Optional

from flask import Flask
from werkzeug.serving import make_server, select_address_family

from image_rotator import settings
from image_rotator.api.rotate import EXTENSION_KEY, bp as rotate_bp
from image_rotator.services.images import ImageSetError, load_image_set
from image_rotator.services.rotation import Rotator
from image_rotator.services.shutdown import ShutdownTrigger

logger = logging.getLogger(__name__)


def create_app(images_dir: Optional[str] = None) -> Flask:  # factory for tests / WSGI
    images_dir = images_dir or settings.IMAGES_DIR
    app = Flask(__name__)
    app.url_map.merge_slashes = False
    app.extensions[EXTENSION_KEY] = Rotator(load_image_set(images_dir))
    app.register_blueprint(rotate_bp)
    return app


MAX_PORT = 65535
LISTEN_BACKLOG = 128


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on host:port. Raises OSError on failure."""
    if not 0 < port <= MAX_PORT:
        raise OSError(errno.EINVAL, f'port {port} out of range 1-{MAX_PORT}')
    sock = socket.socket(select_address_family(host, port), socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except BaseException:
        sock.close()
        raise
    return sock


def serve(app: Flask, host: str, port: int, trigger: ShutdownTrigger) -> int:
    """Run `app` until `trigger` fires. Returns the process exit code.

    The serving loop runs on the calling thread; the trigger stops it
    from a helper thread.
    """
    # binding here keeps werkzeug from printing its own bind diagnostics
    try:
        sock = bind_socket(host, port)
    except (OSError, OverflowError) as e:
        logger.error('error starting server: %s', e)
        return 1

    fd = sock.fileno()
    server = make_server(host, port, app, threaded=True, fd=fd)
    if server.socket.fileno() == fd:
        sock.detach()
    else:
        sock.close()

    # non-daemon request threads are joined when the server closes
    server.daemon_threads = False
    logger.info('listening on port %d', port)

    trigger.subscribe(server.shutdown)
    server.serve_forever()
    logger.info('server stopped')
    return 0


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    try:
        app = create_app(settings.IMAGES_DIR)
    except (ImageSetError, OSError) as e:
        logger.error('failed to load images: %s', e)
        return 1

    trigger = ShutdownTrigger().install()
    return serve(app, settings.HOST, settings.PORT, trigger)


if __name__ == '__main__':
    import sys
    sys.exit(main())
