"""Flask application serving the gallery and the files it references.

Two routes only:

- ``GET /cviz?page=&limit=``: one rendered page of the gallery.
- ``GET /<path>``: streamed bytes of the local file at that literal path.
"""

from __future__ import annotations

import mimetypes

from flask import Flask, Response, render_template, request, send_file
from loguru import logger

from cviz.config import ViewerConfig
from cviz.errors import RequestIOError
from cviz.pager import gallery_page, parse_paging
from cviz.schemas.view import ViewModel
from cviz.urls import url_to_file_path

GALLERY_ROUTE = "/cviz"


def send_raw_file(path: str) -> Response:
    """Stream ``path`` to the client; any OS failure is a RequestIOError.

    werkzeug stats the file and opens it before the response is returned,
    so a missing file, a directory or a permission error surfaces here.
    The open handle is closed with the response.
    """
    mimetype = mimetypes.guess_type(path)[0] or "application/octet-stream"
    try:
        return send_file(path, mimetype=mimetype, conditional=True)
    except OSError as e:
        raise RequestIOError(str(e)) from e


def create_app(view_model: ViewModel, config: ViewerConfig) -> Flask:
    """Build the gallery app over an already built, read-only view model."""
    app = Flask(__name__, static_folder=None)

    @app.get(GALLERY_ROUTE)
    def gallery() -> str:
        page, limit = parse_paging(request.args, config.default_limit)
        current = gallery_page(view_model, page, limit)
        logger.debug(
            f"Gallery page={page} limit={limit} -> "
            f"[{current.start}, {current.end}) of {current.total}"
        )
        return render_template("gallery.html", page=current, route=GALLERY_ROUTE)

    @app.get("/", defaults={"file_path": ""})
    @app.get("/<path:file_path>")
    def raw_file(file_path: str) -> Response:
        path = url_to_file_path(request.path)
        return send_raw_file(path)

    @app.errorhandler(RequestIOError)
    def request_io_error(error: RequestIOError) -> tuple[str, int, dict[str, str]]:
        logger.warning(f"{request.path}: {error}")
        return str(error), 500, {"Content-Type": "text/plain; charset=utf-8"}

    return app
