"""Best-score selection and ranking of per-class scores."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel

MAX_SCORES = 6


class ScoreEntry(BaseModel, frozen=True):
    """A class index with its score on the 0-100 display scale."""

    class_id: int
    score: float


class RankedScores(BaseModel, frozen=True):
    """Best score plus the remaining scores sorted descending.

    ``others`` never contains ``best``.
    """

    best: ScoreEntry
    others: tuple[ScoreEntry, ...] = ()


def rank_scores(scores: Sequence[float], max_scores: int = MAX_SCORES) -> RankedScores:
    """Rank a per-class score vector aligned with the class set.

    Only the first ``max_scores`` entries are considered; the rest are ignored.
    The best entry is the first index holding the maximum score.

    Args:
        scores: Scores in [0, 1], index ``i`` belongs to class ``i``.
        max_scores: Number of leading entries to consider.

    Returns:
        :class:`RankedScores` with every score multiplied by 100.
    """
    considered = np.asarray(list(scores)[:max_scores], dtype=np.float64)
    if considered.size == 0:
        raise ValueError("cannot rank an empty score vector")

    display = considered * 100.0
    # argmax returns the first occurrence of the maximum
    best_idx = int(np.argmax(display))
    order = np.argsort(-display, kind="stable")
    return RankedScores(
        best=ScoreEntry(class_id=best_idx, score=float(display[best_idx])),
        others=tuple(
            ScoreEntry(class_id=int(idx), score=float(display[idx]))
            for idx in order
            if idx != best_idx
        ),
    )


def rank_single(class_id: int, score: float) -> RankedScores:
    """Wrap a single confidence for ``class_id`` as a ranking with no others."""
    return RankedScores(best=ScoreEntry(class_id=class_id, score=score * 100.0))
