"""Hypothesis (insight card) generation from the layer table."""

from datetime import datetime, timezone
from typing import List, Mapping, Optional
from uuid import uuid4

from ..entities import InsightCard, Layer
from ..value_objects import ConfidenceBand
from .layer_rules import (
    DEFAULT_HYPOTHESIS_LAYERS,
    DEFAULT_HYPOTHESIS_PROVENANCE,
    DEFAULT_HYPOTHESIS_TEXT,
    HYPOTHESIS_TEMPLATES,
)

SYSTEM_USER_ID = "system"


class HypothesisGenerator:
    """Turns unlocked layers into insight cards."""

    def generate_hypotheses(
        self,
        layers: Mapping[int, Layer],
        user_id: str = SYSTEM_USER_ID,
        now: Optional[datetime] = None
    ) -> List[InsightCard]:
        """Generate insight cards; always returns at least one card.

        At most one card per layer: the first template whose cut point the
        layer value crosses. With nothing qualifying, a single low-confidence
        default card referencing the earliest layers is returned.
        """
        created_at = now or datetime.now(timezone.utc)
        hypotheses: List[InsightCard] = []

        for layer_id in sorted(layers):
            layer = layers[layer_id]
            if not layer.is_unlocked:
                continue

            for template in HYPOTHESIS_TEMPLATES.get(layer_id, ()):
                if template.matches(layer.value):
                    hypotheses.append(InsightCard(
                        insight_id=self._new_insight_id(),
                        user_id=user_id,
                        layer_refs=[layer_id],
                        text=template.text,
                        confidence_band=ConfidenceBand.for_layer_confidence(layer.confidence),
                        created_at=created_at,
                        provenance=list(template.provenance)
                    ))
                    break

        if not hypotheses:
            hypotheses.append(self._default_hypothesis(user_id, created_at))

        return hypotheses

    def _default_hypothesis(self, user_id: str, created_at: datetime) -> InsightCard:
        return InsightCard(
            insight_id=self._new_insight_id(),
            user_id=user_id,
            layer_refs=list(DEFAULT_HYPOTHESIS_LAYERS),
            text=DEFAULT_HYPOTHESIS_TEXT,
            confidence_band=ConfidenceBand.LOW,
            created_at=created_at,
            provenance=list(DEFAULT_HYPOTHESIS_PROVENANCE)
        )

    @staticmethod
    def _new_insight_id() -> str:
        return f"insight-{uuid4().hex}"
