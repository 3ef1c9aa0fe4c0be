"""Trait score value objects."""

from dataclasses import dataclass, replace

from ..exceptions import ValidationError

MIN_SCORE = 0.0
MAX_SCORE = 100.0
MAX_CONFIDENCE = 1.0


def clamp_score(score: float) -> float:
    """Clamp a raw score to the 0-100 range."""
    return max(MIN_SCORE, min(MAX_SCORE, score))


@dataclass(frozen=True)
class TraitScore:
    """Continuously refined score for a single trait."""

    trait_id: str
    score: float
    confidence: float

    def __post_init__(self) -> None:
        """Validate trait score."""
        if not self.trait_id:
            raise ValidationError("trait_id", self.trait_id, "must not be empty")

        if not (MIN_SCORE <= self.score <= MAX_SCORE):
            raise ValidationError("score", self.score, "must be between 0 and 100")

        if not (0.0 <= self.confidence <= MAX_CONFIDENCE):
            raise ValidationError("confidence", self.confidence, "must be between 0.0 and 1.0")

    def adjusted(self, delta: float, confidence_step: float) -> "TraitScore":
        """Return a copy with the delta applied and confidence raised."""
        return replace(
            self,
            score=clamp_score(self.score + delta),
            confidence=min(MAX_CONFIDENCE, self.confidence + confidence_step),
        )

    def to_dict(self) -> dict:
        return {"trait_id": self.trait_id, "score": self.score, "confidence": self.confidence}

    @classmethod
    def from_dict(cls, data: dict) -> "TraitScore":
        return cls(
            trait_id=data["trait_id"],
            score=float(data["score"]),
            confidence=float(data["confidence"]),
        )

    def __str__(self) -> str:
        """String representation."""
        return f"{self.trait_id}: {self.score:.1f} (confidence: {int(self.confidence * 100)}%)"
