"""Page-window computation over the ordered view objects."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import NamedTuple

from cviz.schemas.view import GalleryPage, ViewModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

# optional sign, ASCII digits only; no spaces or underscores
_INT_RE = re.compile(r"[+-]?[0-9]+")


class PageWindow(NamedTuple):
    """Half-open range ``[start, end)`` plus whether it reaches the end."""

    start: int
    end: int
    is_last_page: bool


def window(total: int, page: int, limit: int) -> PageWindow:
    """Compute the slice of ``total`` items shown on ``page``.

    A page past the end snaps to the last ``limit`` items instead of
    returning an empty window.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if page < 1 or limit < 1:
        raise ValueError(f"page and limit must be >= 1, got page={page} limit={limit}")

    start = (page - 1) * limit
    if start >= total:
        start = max(total - limit, 0)
    end = min(start + limit, total)
    return PageWindow(start=start, end=end, is_last_page=end == total)


def _positive_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    if _INT_RE.fullmatch(value) is None:
        return default
    parsed = int(value)
    return parsed if parsed > 0 else default


def parse_paging(
    params: Mapping[str, str], default_limit: int = DEFAULT_LIMIT
) -> tuple[int, int]:
    """Read ``page`` and ``limit`` from query parameters.

    Missing, non-numeric and non-positive values fall back to the defaults.
    """
    page = _positive_int(params.get("page"), DEFAULT_PAGE)
    limit = _positive_int(params.get("limit"), default_limit)
    return page, limit


def gallery_page(view_model: ViewModel, page: int, limit: int) -> GalleryPage:
    """Select the window for ``page`` without touching ``view_model``."""
    total = len(view_model.objects)
    start, end, is_last_page = window(total, page, limit)
    return GalleryPage(
        classes=view_model.classes,
        objects=view_model.objects[start:end],
        is_last_page=is_last_page,
        page=page,
        limit=limit,
        total=total,
        start=start,
        end=end,
        labeled_count=view_model.labeled_count,
        correct_count=view_model.correct_count,
        accuracy=view_model.accuracy,
    )
