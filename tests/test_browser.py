"""Tests for launching the default browser."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from cviz.errors import BrowserLaunchError
from cviz.server.browser import open_url, url_open_command

URL = "http://127.0.0.1:2849/cviz"


class TestUrlOpenCommand:
    def test_linux(self) -> None:
        assert url_open_command(URL, "linux") == ["xdg-open", URL]

    def test_macos(self) -> None:
        assert url_open_command(URL, "darwin") == ["open", URL]

    def test_windows(self) -> None:
        assert url_open_command(URL, "win32") == ["cmd", "/c", "start", "", URL]


class TestOpenUrl:
    @patch("cviz.server.browser.subprocess.Popen")
    def test_starts_without_waiting(self, mock_popen: MagicMock) -> None:
        open_url(URL, "linux")
        mock_popen.assert_called_once()
        assert mock_popen.call_args.args[0] == ["xdg-open", URL]

    @patch(
        "cviz.server.browser.subprocess.Popen",
        side_effect=FileNotFoundError("xdg-open"),
    )
    def test_missing_command(self, mock_popen: MagicMock) -> None:
        with pytest.raises(BrowserLaunchError, match="xdg-open"):
            open_url(URL, "linux")
