"""Render-ready view-model schemas.

Everything here is frozen and uses tuples, so a built :class:`ViewModel` can
be shared by concurrent requests without locking.
"""

from __future__ import annotations

from pydantic import BaseModel


class ClassView(BaseModel, frozen=True):
    """A class with its display color."""

    index: int
    name: str
    color: str


class ScoreView(BaseModel, frozen=True):
    """A class score on the 0-100 display scale."""

    class_id: int
    name: str
    color: str
    score: float


class GroundTruthView(BaseModel, frozen=True):
    """Ground-truth label and whether it matches the prediction."""

    class_id: int
    name: str
    color: str
    match: bool


class ViewObject(BaseModel, frozen=True):
    """Fully resolved representation of one input record."""

    object_id: str
    file_path: str
    file_url: str
    predicted: ClassView
    # score of best_score, which may belong to a class other than predicted
    confidence: float
    best_score: ScoreView
    other_scores: tuple[ScoreView, ...] = ()
    ground_truth: GroundTruthView | None = None


class ViewModel(BaseModel, frozen=True):
    """Classes and ordered view objects for one gallery session."""

    classes: tuple[ClassView, ...]
    objects: tuple[ViewObject, ...]

    @property
    def labeled_count(self) -> int:
        return sum(1 for obj in self.objects if obj.ground_truth is not None)

    @property
    def correct_count(self) -> int:
        return sum(
            1
            for obj in self.objects
            if obj.ground_truth is not None and obj.ground_truth.match
        )

    @property
    def accuracy(self) -> float | None:
        """Fraction of labeled objects predicted correctly, ``None`` if unlabeled."""
        labeled = self.labeled_count
        if labeled == 0:
            return None
        return self.correct_count / labeled


class GalleryPage(BaseModel, frozen=True):
    """One window of the view model, as handed to the renderer."""

    classes: tuple[ClassView, ...]
    objects: tuple[ViewObject, ...]
    is_last_page: bool
    page: int
    limit: int
    total: int
    start: int
    end: int
    labeled_count: int = 0
    correct_count: int = 0
    accuracy: float | None = None

    @property
    def has_previous(self) -> bool:
        return self.start > 0

    @property
    def next_page(self) -> int:
        return self.page + 1

    @property
    def previous_page(self) -> int:
        # Derived from start: a snapped window may not sit on a page boundary
        return max((self.start + self.limit - 1) // self.limit, 1)
