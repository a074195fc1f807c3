"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from cviz.cli import build_parser, config_from_args, main, print_summary, serve
from cviz.config import ViewerConfig
from cviz.errors import BrowserLaunchError, ConfigError
from cviz.schemas.view import ViewModel


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["results.json"])
        cfg = config_from_args(args)
        assert args.input == "results.json"
        assert cfg == ViewerConfig()

    def test_options(self) -> None:
        args = build_parser().parse_args(
            [
                "r.json",
                "--port",
                "0",
                "--limit",
                "5",
                "--colors",
                "random",
                "--seed",
                "3",
                "--no-browser",
                "--max-scores",
                "4",
            ]
        )
        cfg = config_from_args(args)
        assert cfg.port == 0
        assert cfg.default_limit == 5
        assert cfg.color_strategy == "random"
        assert cfg.color_seed == 3
        assert cfg.max_scores == 4
        assert cfg.open_browser is False

    def test_invalid_options_are_config_errors(self) -> None:
        args = build_parser().parse_args(["r.json", "--host", "0.0.0.0"])
        with pytest.raises(ConfigError, match="invalid options"):
            config_from_args(args)


class TestMain:
    def test_missing_argument_exits_nonzero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.json"), "--no-browser"]) == 1

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        assert main([str(path), "--no-browser"]) == 1

    def test_invalid_records(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps(
                {
                    "classes": ["a"],
                    "objects": [{"file": "/x.jpg", "class": 3, "score": 0.1}],
                }
            )
        )
        assert main([str(path), "--no-browser"]) == 1

    @patch("cviz.cli.serve", return_value=0)
    def test_serves_built_view_model(
        self, mock_serve: MagicMock, results_file: Path
    ) -> None:
        assert main([str(results_file), "--no-browser", "--port", "0"]) == 0
        view_model, config = mock_serve.call_args.args
        assert len(view_model.objects) == 3
        assert config.port == 0
        assert config.open_browser is False


class TestServe:
    @patch("cviz.cli.open_url", side_effect=BrowserLaunchError("no browser"))
    @patch("cviz.cli.GalleryServer")
    def test_browser_failure_is_not_fatal(
        self,
        mock_server_cls: MagicMock,
        mock_open_url: MagicMock,
        view_model: ViewModel,
    ) -> None:
        server = mock_server_cls.return_value
        server.url = "http://127.0.0.1:1/cviz"
        assert serve(view_model, ViewerConfig()) == 0
        mock_open_url.assert_called_once_with("http://127.0.0.1:1/cviz")
        server.start.assert_called_once()
        server.wait.assert_called_once()
        server.shutdown.assert_called_once()

    @patch("cviz.cli.open_url")
    @patch("cviz.cli.GalleryServer")
    def test_interrupt_shuts_down(
        self,
        mock_server_cls: MagicMock,
        mock_open_url: MagicMock,
        view_model: ViewModel,
        config: ViewerConfig,
    ) -> None:
        server = mock_server_cls.return_value
        server.wait.side_effect = KeyboardInterrupt
        assert serve(view_model, config) == 0
        mock_open_url.assert_not_called()
        server.shutdown.assert_called_once()


class TestPrintSummary:
    def test_lists_classes_and_accuracy(self, view_model: ViewModel) -> None:
        buffer = io.StringIO()
        print_summary(view_model, Console(file=buffer, width=120))
        output = buffer.getvalue()
        for name in ("cat", "dog", "bird"):
            assert name in output
        assert "Accuracy: 50.0%" in output

    def test_no_accuracy_without_labels(self, results_payload: dict[str, Any]) -> None:
        from cviz.io.input import parse_input
        from cviz.view_model import build_from_document

        for obj in results_payload["objects"]:
            obj.pop("label", None)
        document = parse_input(json.dumps(results_payload))
        vm = build_from_document(document, ViewerConfig())
        buffer = io.StringIO()
        print_summary(vm, Console(file=buffer, width=120))
        assert "Accuracy" not in buffer.getvalue()
