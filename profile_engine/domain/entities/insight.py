"""Insight card entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from ..value_objects import ConfidenceBand


@dataclass(frozen=True)
class InsightCard:
    """User-facing hypothesis derived from unlocked layers."""

    insight_id: str
    user_id: str
    layer_refs: List[int]
    text: str
    confidence_band: ConfidenceBand
    created_at: datetime
    provenance: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "insight_id": self.insight_id,
            "user_id": self.user_id,
            "layer_refs": list(self.layer_refs),
            "text": self.text,
            "confidence_band": self.confidence_band.value,
            "created_at": self.created_at.isoformat(),
            "provenance": list(self.provenance),
        }
