"""Layer domain entity."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..value_objects import LayerStatus, UserValidation

LAYER_COUNT = 15
LAYER_IDS = tuple(range(1, LAYER_COUNT + 1))

NEUTRAL_VALUE = 0.5
PRIOR_CONFIDENCE = 0.5


@dataclass
class Layer:
    """One of the fifteen fixed profile layers.

    Rebuilt from the full answer set on every aggregation; never carried
    between calls.
    """

    id: int
    name: str
    value: float = NEUTRAL_VALUE
    confidence: float = PRIOR_CONFIDENCE
    status: LayerStatus = LayerStatus.UNFORMED
    stability: float = 0.0
    signal_density: int = 0
    convergence_count: int = 0
    evidence_summary: List[str] = field(default_factory=list)
    user_validation: Optional[UserValidation] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate layer."""
        if self.id not in LAYER_IDS:
            raise ValueError(f"Layer id must be between 1 and {LAYER_COUNT}")

        if not (0.0 <= self.value <= 1.0):
            raise ValueError("Layer value must be between 0.0 and 1.0")

    @property
    def is_unlocked(self) -> bool:
        """Check if the layer has any evidence-backed state."""
        return self.status.is_unlocked

    def add_evidence(self, text: str) -> None:
        self.evidence_summary.append(text)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "confidence": self.confidence,
            "status": self.status.value,
            "stability": self.stability,
            "signal_density": self.signal_density,
            "convergence_count": self.convergence_count,
            "evidence_summary": list(self.evidence_summary),
            "user_validation": self.user_validation.value if self.user_validation else None,
            "description": self.description,
        }
