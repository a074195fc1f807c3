"""Shared pytest fixtures for cviz tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from flask.testing import FlaskClient

from cviz.config import ViewerConfig
from cviz.io.input import parse_input
from cviz.schemas.view import ViewModel
from cviz.server.app import create_app
from cviz.view_model import build_from_document


@pytest.fixture()
def results_payload(tmp_path: Path) -> dict[str, Any]:
    """Three multi-score objects over three classes.

    Image files live under ``tmp_path/images`` so the raw-file route can
    serve them. Object 0 is correct, object 1 is wrong, object 2 is unlabeled.
    """
    image_dir = tmp_path / "images"
    image_dir.mkdir()
    for name in ("a.jpg", "b.jpg", "c.jpg"):
        (image_dir / name).write_bytes(b"\xff\xd8\xff\xe0" + name.encode())

    return {
        "classes": ["cat", "dog", "bird"],
        "objects": [
            {
                "filePath": str(image_dir / "a.jpg"),
                "class": 0,
                "label": 0,
                "scores": [0.7, 0.2, 0.1],
            },
            {
                "filePath": str(image_dir / "b.jpg"),
                "class": 1,
                "label": 2,
                "scores": [0.1, 0.6, 0.3],
            },
            {
                "filePath": str(image_dir / "c.jpg"),
                "class": 2,
                "scores": [0.05, 0.15, 0.8],
            },
        ],
    }


@pytest.fixture()
def results_file(tmp_path: Path, results_payload: dict[str, Any]) -> Path:
    path = tmp_path / "results.json"
    path.write_text(json.dumps(results_payload))
    return path


@pytest.fixture()
def config() -> ViewerConfig:
    return ViewerConfig(open_browser=False)


@pytest.fixture()
def view_model(results_payload: dict[str, Any], config: ViewerConfig) -> ViewModel:
    document = parse_input(json.dumps(results_payload))
    return build_from_document(document, config)


@pytest.fixture()
def client(view_model: ViewModel, config: ViewerConfig) -> FlaskClient:
    app = create_app(view_model, config)
    app.testing = True
    return app.test_client()
