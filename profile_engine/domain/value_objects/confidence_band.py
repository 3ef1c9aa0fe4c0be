"""Insight confidence bands."""

from enum import Enum

HIGH_CONFIDENCE_THRESHOLD = 0.8


class ConfidenceBand(Enum):
    """Coarse confidence label attached to an insight."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def for_layer_confidence(cls, confidence: float) -> "ConfidenceBand":
        """High above 0.8, otherwise medium. Low is reserved for the default insight."""
        return cls.HIGH if confidence > HIGH_CONFIDENCE_THRESHOLD else cls.MEDIUM
