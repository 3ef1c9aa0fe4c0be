"""Domain value objects module."""

from .traits import TraitScore, clamp_score
from .layer_status import LayerStatus, UserValidation
from .question_type import QuestionType
from .confidence_band import ConfidenceBand

__all__ = [
    "TraitScore",
    "clamp_score",
    "LayerStatus",
    "UserValidation",
    "QuestionType",
    "ConfidenceBand",
]
