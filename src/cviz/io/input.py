"""Results document loader using orjson."""

from __future__ import annotations

from pathlib import Path

import orjson
from loguru import logger
from pydantic import ValidationError

from cviz.errors import ConfigError
from cviz.schemas.input import InputDocument


def parse_input(data: bytes | str, source: str = "<input>") -> InputDocument:
    """Decode and shape-check a results document.

    Raises:
        ConfigError: If ``data`` is not JSON or does not match either record shape.
    """
    try:
        payload = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise ConfigError(f"{source}: invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ConfigError(
            f"{source}: expected a JSON object with 'classes' and 'objects'"
        )

    try:
        return InputDocument.model_validate(payload)
    except ValidationError as e:
        raise ConfigError(f"{source}: malformed results document:\n{e}") from e


def load_input(path: str | Path) -> InputDocument:
    """Read the results document at ``path``."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"cannot read input file {path}: {e}") from e

    document = parse_input(data, source=str(path))
    logger.info(
        f"Loaded {len(document.objects)} objects and "
        f"{len(document.classes)} classes from {path}"
    )
    return document
