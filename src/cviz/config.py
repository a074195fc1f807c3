"""Pydantic frozen configuration models for cviz."""

import ipaddress
import re

from pydantic import BaseModel, Field, field_validator

from cviz.colors import DEFAULT_PALETTE, ColorStrategy

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ViewerConfig(BaseModel, frozen=True):
    """Configuration for building and serving a gallery.

    Validated at construction time. Frozen — built once at startup and passed
    explicitly to the builder and the server.
    """

    host: str = "127.0.0.1"
    port: int = Field(default=2849, ge=0, le=65535)
    default_limit: int = Field(default=20, ge=1)
    max_scores: int = Field(default=6, ge=1)
    color_strategy: ColorStrategy = "palette"
    color_seed: int | None = None
    palette: tuple[str, ...] = DEFAULT_PALETTE
    open_browser: bool = True

    @field_validator("host")
    @classmethod
    def _host_is_loopback(cls, value: str) -> str:
        """Only loopback addresses (or ``localhost``) are accepted."""
        if value == "localhost":
            return value
        try:
            address = ipaddress.ip_address(value)
        except ValueError as e:
            raise ValueError(f"host must be a loopback address, got {value!r}") from e
        if not address.is_loopback:
            raise ValueError(f"host must be a loopback address, got {value!r}")
        return value

    @field_validator("palette")
    @classmethod
    def _palette_is_hex(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("palette must contain at least one color")
        bad = [c for c in value if not _HEX_COLOR.match(c)]
        if bad:
            raise ValueError(f"palette entries must be #RRGGBB, got {bad}")
        return tuple(c.upper() for c in value)
