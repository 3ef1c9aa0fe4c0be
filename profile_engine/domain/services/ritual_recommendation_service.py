"""Ritual recommendations derived from layer values."""

from typing import List, Mapping

from ..entities import Layer, RitualRecommendation

RESET_RITUAL = RitualRecommendation(
    ritual_id="ritual-reset",
    title="5-Minute Reset",
    description="A quick grounding practice to stabilize energy in low-friction environments.",
    category="Energy",
    duration="5m",
)

REFLECTION_RITUAL = RitualRecommendation(
    ritual_id="ritual-reflection",
    title="Lexical Reflection",
    description="A daily prompt to articulate your internal state using your core descriptors.",
    category="Identity",
    duration="10m",
)

CHECKIN_RITUAL = RitualRecommendation(
    ritual_id="ritual-checkin",
    title="Daily Pulse",
    description="A light-touch check-in to stay aligned with your emerging patterns.",
    category="Integration",
    duration="2m",
)


class RitualRecommendationService:
    """Recommends practices; never returns an empty list."""

    def recommend(self, layers: Mapping[int, Layer]) -> List[RitualRecommendation]:
        recommendations: List[RitualRecommendation] = []

        core = layers.get(1)
        if core is not None and core.value < 0.5:
            recommendations.append(RESET_RITUAL)

        energy = layers.get(2)
        if energy is not None and energy.value > 0.7:
            recommendations.append(REFLECTION_RITUAL)

        if not recommendations:
            recommendations.append(CHECKIN_RITUAL)

        return recommendations
