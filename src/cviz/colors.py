"""Per-class color assignment.

The default strategy cycles a fixed curated palette so a class keeps the same
color across runs. Palette colors repeat once the class count exceeds the
palette size.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Literal

ColorStrategy = Literal["palette", "random"]

DEFAULT_PALETTE: tuple[str, ...] = (
    "#E6194B",
    "#3CB44B",
    "#FFE119",
    "#4363D8",
    "#F58231",
    "#911EB4",
    "#46F0F0",
    "#F032E6",
    "#BCF60C",
    "#FABEBE",
    "#008080",
    "#E6BEFF",
    "#9A6324",
    "#FFFAC8",
    "#800000",
    "#AAFFC3",
    "#808000",
    "#FFD8B1",
    "#000075",
    "#A9A9A9",
    "#FF6F61",
    "#6B5B95",
    "#88B04B",
    "#F7CAC9",
    "#92A8D1",
    "#00A591",
    "#DD4124",
)

# Random generation bounds
_CHANNEL_MIN = 64
_CHANNEL_SPLIT = 128
BRIGHT_THRESHOLD = 350


def to_hex(r: int, g: int, b: int) -> str:
    """Format RGB channels as ``#RRGGBB``."""
    return f"#{r:02X}{g:02X}{b:02X}"


def colors_for(n: int, palette: Sequence[str] = DEFAULT_PALETTE) -> list[str]:
    """Return ``n`` colors, ``palette[i % len(palette)]`` for class ``i``."""
    if n < 0:
        raise ValueError(f"class count must be non-negative, got {n}")
    if not palette:
        raise ValueError("palette must not be empty")
    return [palette[i % len(palette)] for i in range(n)]


def random_color(rng: random.Random) -> str:
    """Draw one color with at least two channels above a brightness floor.

    A dark red channel forces green and blue into the upper half.
    """
    r = rng.randrange(256)
    if r > _CHANNEL_SPLIT:
        g = rng.randrange(_CHANNEL_MIN, 256)
        b = rng.randrange(_CHANNEL_MIN, 256)
    else:
        g = rng.randrange(_CHANNEL_SPLIT, 256)
        b = rng.randrange(_CHANNEL_SPLIT, 256)
    return to_hex(r, g, b)


def random_bright_color(
    rng: random.Random, threshold: int = BRIGHT_THRESHOLD
) -> str:
    """Re-draw :func:`random_color` until the channel sum reaches ``threshold``."""
    while True:
        color = random_color(rng)
        if channel_sum(color) >= threshold:
            return color


def channel_sum(color: str) -> int:
    """Sum of the R, G and B channels of a ``#RRGGBB`` string."""
    return sum(int(color[i : i + 2], 16) for i in (1, 3, 5))


def random_colors(n: int, seed: int | None = None) -> list[str]:
    """Return ``n`` bright random colors. Reproducible when ``seed`` is set."""
    if n < 0:
        raise ValueError(f"class count must be non-negative, got {n}")
    rng = random.Random(seed)
    return [random_bright_color(rng) for _ in range(n)]


def assign_colors(
    n: int,
    strategy: ColorStrategy = "palette",
    palette: Sequence[str] = DEFAULT_PALETTE,
    seed: int | None = None,
) -> list[str]:
    """Assign one color per class index using the configured strategy."""
    if strategy == "palette":
        return colors_for(n, palette)
    if strategy == "random":
        return random_colors(n, seed)
    raise ValueError(f"unknown color strategy: {strategy!r}")
