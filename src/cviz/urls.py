"""Mapping between local file paths and raw-file route URLs."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import quote

_DRIVE_URL = re.compile(r"^/[A-Za-z]:/")


def file_url(file_path: str) -> str:
    """URL path under which the raw-file route serves ``file_path``.

    Relative paths are anchored at the current working directory.
    """
    posix = Path(file_path).absolute().as_posix()
    if not posix.startswith("/"):
        # Windows drive paths ("C:/...") still need a leading slash
        posix = "/" + posix
    return quote(posix)


def url_to_file_path(url_path: str) -> str:
    """Invert :func:`file_url` for an already URL-decoded request path."""
    if _DRIVE_URL.match(url_path):
        return url_path[1:]
    return url_path
