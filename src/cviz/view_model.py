"""View-model builder: validates records and resolves them for rendering."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from loguru import logger

from cviz.colors import assign_colors
from cviz.config import ViewerConfig
from cviz.errors import RecordValidationError, Violation
from cviz.ranking import MAX_SCORES, RankedScores, ScoreEntry, rank_scores, rank_single
from cviz.schemas.input import InputDocument, ObjectRecord
from cviz.schemas.view import (
    ClassView,
    GroundTruthView,
    ScoreView,
    ViewModel,
    ViewObject,
)
from cviz.urls import file_url


def validate_records(
    records: Sequence[ObjectRecord],
    n_classes: int,
    max_scores: int = MAX_SCORES,
) -> list[Violation]:
    """Collect every violation in ``records``; an empty list means valid."""
    violations: list[Violation] = []
    first_use: dict[str, int] = {}
    for index, record in enumerate(records):
        violations.extend(_check_record(index, record, n_classes, max_scores))
        if record.object_id is None:
            continue
        if record.object_id in first_use:
            violations.append(
                Violation(
                    index,
                    "id",
                    f"duplicate id {record.object_id!r} "
                    f"(first used by objects[{first_use[record.object_id]}])",
                )
            )
        else:
            first_use[record.object_id] = index
    return violations


def _check_record(
    index: int, record: ObjectRecord, n_classes: int, max_scores: int
) -> list[Violation]:
    found: list[Violation] = []
    if not 0 <= record.class_id < n_classes:
        found.append(
            Violation(
                index,
                "class",
                f"class index {record.class_id} out of range [0, {n_classes})",
            )
        )
    if record.label_id is not None and not 0 <= record.label_id < n_classes:
        found.append(
            Violation(
                index,
                "label",
                f"label index {record.label_id} out of range [0, {n_classes})",
            )
        )

    if record.scores is not None:
        considered = record.scores[:max_scores]
        if not considered:
            found.append(Violation(index, "scores", "score vector is empty"))
        for pos, value in enumerate(considered):
            if not 0.0 <= value <= 1.0:
                found.append(
                    Violation(index, f"scores[{pos}]", f"score {value} outside [0, 1]")
                )
        if len(considered) > n_classes:
            found.append(
                Violation(
                    index,
                    "scores",
                    f"{len(considered)} scores for only {n_classes} classes",
                )
            )
    elif record.score is not None and not 0.0 <= record.score <= 1.0:
        found.append(
            Violation(index, "score", f"score {record.score} outside [0, 1]")
        )
    return found


def build_view_model(
    classes: Sequence[str],
    records: Sequence[ObjectRecord],
    *,
    colors: Sequence[str],
    max_scores: int = MAX_SCORES,
) -> ViewModel:
    """Validate ``records`` and resolve them into an ordered view model.

    Args:
        classes: Ordered class names; position is the class index.
        records: Normalized input records, in display order.
        colors: One ``#RRGGBB`` color per class index.
        max_scores: Leading score-vector entries considered for ranking.

    Raises:
        RecordValidationError: Listing every invalid field across all records.
    """
    if len(colors) < len(classes):
        raise ValueError(f"{len(colors)} colors for {len(classes)} classes")

    violations = validate_records(records, len(classes), max_scores)
    if violations:
        raise RecordValidationError(violations)

    class_views = tuple(
        ClassView(index=i, name=name, color=colors[i])
        for i, name in enumerate(classes)
    )

    taken = {r.object_id for r in records if r.object_id is not None}
    objects = []
    for record in records:
        object_id = _derive_id(record, taken)
        objects.append(_view_object(record, object_id, class_views, max_scores))

    logger.debug(f"Built view model: {len(objects)} objects, {len(classes)} classes")
    return ViewModel(classes=class_views, objects=tuple(objects))


def build_from_document(document: InputDocument, config: ViewerConfig) -> ViewModel:
    """Assign colors per ``config`` and build the view model for ``document``."""
    colors = assign_colors(
        len(document.classes),
        strategy=config.color_strategy,
        palette=config.palette,
        seed=config.color_seed,
    )
    return build_view_model(
        document.classes,
        document.records(),
        colors=colors,
        max_scores=config.max_scores,
    )


def _derive_id(record: ObjectRecord, taken: set[str]) -> str:
    """Explicit id, else the file name if unused, else a random token."""
    if record.object_id is not None:
        return record.object_id
    name = record.file_path.replace("\\", "/").rsplit("/", 1)[-1]
    if name and name not in taken:
        taken.add(name)
        return name
    token = uuid.uuid4().hex
    taken.add(token)
    return token


def _score_view(entry: ScoreEntry, class_views: tuple[ClassView, ...]) -> ScoreView:
    cls = class_views[entry.class_id]
    return ScoreView(
        class_id=cls.index, name=cls.name, color=cls.color, score=entry.score
    )


def _view_object(
    record: ObjectRecord,
    object_id: str,
    class_views: tuple[ClassView, ...],
    max_scores: int,
) -> ViewObject:
    ranked: RankedScores
    if record.scores is not None:
        ranked = rank_scores(record.scores, max_scores)
    else:
        ranked = rank_single(record.class_id, record.score or 0.0)

    ground_truth = None
    if record.label_id is not None:
        label = class_views[record.label_id]
        ground_truth = GroundTruthView(
            class_id=label.index,
            name=label.name,
            color=label.color,
            match=record.label_id == record.class_id,
        )

    best = _score_view(ranked.best, class_views)
    return ViewObject(
        object_id=object_id,
        file_path=record.file_path,
        file_url=file_url(record.file_path),
        predicted=class_views[record.class_id],
        confidence=best.score,
        best_score=best,
        other_scores=tuple(_score_view(e, class_views) for e in ranked.others),
        ground_truth=ground_truth,
    )
