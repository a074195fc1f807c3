"""Input and view-model schemas."""

from cviz.schemas.input import (
    InputDocument,
    MultiScoreRecord,
    ObjectRecord,
    SingleScoreRecord,
)
from cviz.schemas.view import (
    ClassView,
    GalleryPage,
    GroundTruthView,
    ScoreView,
    ViewModel,
    ViewObject,
)

__all__ = [
    "ClassView",
    "GalleryPage",
    "GroundTruthView",
    "InputDocument",
    "MultiScoreRecord",
    "ObjectRecord",
    "ScoreView",
    "SingleScoreRecord",
    "ViewModel",
    "ViewObject",
]
