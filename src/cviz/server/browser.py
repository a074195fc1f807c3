"""Open the gallery in the platform's default browser."""

from __future__ import annotations

import subprocess
import sys

from cviz.errors import BrowserLaunchError


def url_open_command(url: str, platform: str | None = None) -> list[str]:
    """Command line that opens ``url`` with the platform's default handler."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        # First quoted argument of ``start`` is the window title
        return ["cmd", "/c", "start", "", url]
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def open_url(url: str, platform: str | None = None) -> None:
    """Start the URL-opening command without waiting for it.

    Raises:
        BrowserLaunchError: If the command cannot be started.
    """
    command = url_open_command(url, platform)
    try:
        subprocess.Popen(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError as e:
        raise BrowserLaunchError(f"could not run {command[0]!r}: {e}") from e
