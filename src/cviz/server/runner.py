"""Threaded listener lifecycle for the gallery app."""

from __future__ import annotations

import socket
import threading
from types import TracebackType

from flask import Flask
from loguru import logger
from werkzeug.serving import make_server

from cviz.errors import ConfigError
from cviz.server.app import GALLERY_ROUTE


def _listen(host: str, port: int) -> socket.socket:
    """Bind and listen on (host, port), raising ConfigError on failure."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise ConfigError(f"cannot listen on {host}:{port}: {e}") from e
    return sock


class GalleryServer:
    """Run a Flask app on a dedicated thread, one thread per request.

    ``wait`` blocks on a single completion event that is set when the
    listener stops. ``shutdown`` stops the listener, joins the serving
    thread and closes the socket.

    Args:
        app: The WSGI application to serve.
        host: Loopback address to bind.
        port: Port to bind; ``0`` picks a free port.
    """

    def __init__(self, app: Flask, host: str, port: int) -> None:
        listener = _listen(host, port)
        try:
            self._server = make_server(
                host, port, app, threaded=True, fd=listener.fileno()
            )
        finally:
            # werkzeug serves from its own duplicate of the descriptor
            listener.close()
        self.host = host
        self._done = threading.Event()
        self._thread = threading.Thread(
            target=self._serve, name="cviz-server", daemon=True
        )

    @property
    def port(self) -> int:
        return int(self._server.port)

    @property
    def url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"http://{host}:{self.port}{GALLERY_ROUTE}"

    def start(self) -> GalleryServer:
        self._thread.start()
        logger.debug(f"Listening on {self.host}:{self.port}")
        return self

    def _serve(self) -> None:
        try:
            self._server.serve_forever()
        finally:
            self._done.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the listener stops. Returns False on timeout."""
        return self._done.wait(timeout)

    def shutdown(self) -> None:
        if self._thread.is_alive():
            self._server.shutdown()
            self._thread.join()
        self._server.server_close()
        logger.debug("Listener closed")

    def __enter__(self) -> GalleryServer:
        return self.start()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()
