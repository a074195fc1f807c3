"""Local gallery server."""

from cviz.server.app import create_app
from cviz.server.browser import open_url
from cviz.server.runner import GalleryServer

__all__ = ["GalleryServer", "create_app", "open_url"]
