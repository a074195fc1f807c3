"""Input document schemas.

Two record shapes exist across versions of the results format:

- multi-score: ``{"id"?, "filePath", "class", "label"?, "scores": [...]}``
- single-score: ``{"id"?, "file", "class", "label"?, "score": ...}``

Each shape adapts into one normalized :class:`ObjectRecord`. Range checks
(class indices, score bounds) happen later in the view-model builder so that
every bad record is reported at once.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator


class ObjectRecord(BaseModel, frozen=True):
    """Normalized input record. Exactly one of ``score``/``scores`` is set."""

    object_id: str | None = None
    file_path: str
    class_id: int
    label_id: int | None = None
    score: float | None = None
    scores: tuple[float, ...] | None = None

    @model_validator(mode="after")
    def _one_score_form(self) -> "ObjectRecord":
        if (self.score is None) == (self.scores is None):
            raise ValueError("exactly one of score or scores must be set")
        return self


class MultiScoreRecord(BaseModel, frozen=True, populate_by_name=True):
    """Record carrying one score per class, aligned with ``classes``."""

    object_id: str | None = Field(default=None, alias="id")
    file_path: str = Field(alias="filePath")
    class_id: int = Field(alias="class")
    label_id: int | None = Field(default=None, alias="label")
    scores: tuple[float, ...]

    def to_record(self) -> ObjectRecord:
        return ObjectRecord(
            object_id=self.object_id,
            file_path=self.file_path,
            class_id=self.class_id,
            label_id=self.label_id,
            scores=self.scores,
        )


class SingleScoreRecord(BaseModel, frozen=True, populate_by_name=True):
    """Record carrying only the confidence of the predicted class."""

    object_id: str | None = Field(default=None, alias="id")
    file_path: str = Field(alias="file")
    class_id: int = Field(alias="class")
    label_id: int | None = Field(default=None, alias="label")
    score: float

    def to_record(self) -> ObjectRecord:
        return ObjectRecord(
            object_id=self.object_id,
            file_path=self.file_path,
            class_id=self.class_id,
            label_id=self.label_id,
            score=self.score,
        )


def _record_shape(value: Any) -> str | None:
    """Pick the record adapter from the keys present."""
    if isinstance(value, dict):
        if "scores" in value:
            return "multi"
        if "score" in value:
            return "single"
        return None
    if isinstance(value, MultiScoreRecord):
        return "multi"
    if isinstance(value, SingleScoreRecord):
        return "single"
    return None


RawRecord = Annotated[
    Union[
        Annotated[MultiScoreRecord, Tag("multi")],
        Annotated[SingleScoreRecord, Tag("single")],
    ],
    Discriminator(
        _record_shape,
        custom_error_type="record_shape",
        custom_error_message="record needs either a 'scores' list or a 'score' value",
    ),
]


class InputDocument(BaseModel, frozen=True):
    """Top-level results document: ordered class names plus records."""

    classes: tuple[str, ...]
    objects: tuple[RawRecord, ...]

    def records(self) -> list[ObjectRecord]:
        """Normalized records in input order."""
        return [obj.to_record() for obj in self.objects]
