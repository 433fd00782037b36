"""Catch-all blueprint: every request gets the next image in the rotation."""
from __future__ import annotations
from flask import Blueprint, Response, current_app

from image_rotator.services.rotation import Rotator

bp = Blueprint('rotate_api', __name__)

EXTENSION_KEY = 'image_rotator'
CONTENT_TYPE = 'image/jpeg'
METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def get_rotator() -> Rotator:
    return current_app.extensions[EXTENSION_KEY]


def _next_image_response() -> Response:
    image = get_rotator().next_image()
    current_app.logger.debug('serving %s', image.name)
    resp = Response(image.data, status=200, content_type=CONTENT_TYPE)
    resp.headers['Content-Length'] = str(len(image.data))
    # request threads are joined on shutdown, so don't leave them idling on keep-alive
    resp.headers['Connection'] = 'close'
    return resp


@bp.route('/', defaults={'path': ''}, methods=METHODS)
@bp.route('/<path:path>', methods=METHODS)
def rotate(path: str):
    return _next_image_response()


@bp.app_errorhandler(405)
def rotate_any_method(_err):
    # methods outside METHODS still get an image
    return _next_image_response()


@bp.app_errorhandler(404)
def rotate_any_path(_err):
    return _next_image_response()
