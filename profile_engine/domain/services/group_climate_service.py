"""Team climate aggregation with cohort-size suppression."""

import logging
import math
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from ..entities import (
    GroupClimateResult,
    LayerIndicator,
    MemberSignals,
    SuppressedClimate,
    SuppressionReason,
    TeamClimate,
)
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

MIN_COHORT_SIZE = 5
CLIMATE_LAYERS = (1, 2, 3, 4, 5, 6, 7, 8)
MAX_LIST_ITEMS = 3

# Indicator -> source layer
PACE_LAYER = 2
SAFETY_LAYER = 7
CLARITY_LAYER = 4
IDENTITY_LAYER = 8
RESILIENCE_LAYER = 1

MAX_DIVERSITY_PENALTY = 0.15


class GroupClimateService:
    """Aggregates member signals into team-level indicators."""

    def __init__(self, min_cohort_size: int = MIN_COHORT_SIZE):
        if min_cohort_size < MIN_COHORT_SIZE:
            raise ValidationError(
                "min_cohort_size", min_cohort_size, f"must be at least {MIN_COHORT_SIZE}"
            )
        self.min_cohort_size = min_cohort_size

    def admits_cohort(self, member_count: int) -> bool:
        """Check if a cohort is large enough to be aggregated."""
        return member_count >= self.min_cohort_size

    def calculate_team_climate(
        self,
        member_signals: Sequence[MemberSignals],
        member_count: int
    ) -> GroupClimateResult:
        """Compute team climate, or a suppressed result for small cohorts.

        The cohort check runs before the member records are read at all.
        """
        if not self.admits_cohort(member_count):
            return SuppressedClimate(SuppressionReason.INSUFFICIENT_COHORT)

        if not member_signals:
            return SuppressedClimate(SuppressionReason.NO_MEMBER_DATA)

        # the declared count is not trusted on its own
        if len(member_signals) < self.min_cohort_size:
            return SuppressedClimate(SuppressionReason.INSUFFICIENT_COHORT)

        indicators = {
            layer_id: self._layer_indicator(layer_id, member_signals)
            for layer_id in CLIMATE_LAYERS
        }

        pace = indicators[PACE_LAYER].score
        safety = indicators[SAFETY_LAYER].score
        clarity = indicators[CLARITY_LAYER].score
        identity = indicators[IDENTITY_LAYER].score
        resilience = indicators[RESILIENCE_LAYER].score

        diversity_friction = (
            indicators[CLARITY_LAYER].diversity
            + indicators[SAFETY_LAYER].diversity
            + indicators[RESILIENCE_LAYER].diversity
        ) / 3
        raw_iq = clarity * 0.4 + safety * 0.3 + resilience * 0.3
        collective_iq = raw_iq * (1 - diversity_friction * MAX_DIVERSITY_PENALTY)

        logger.debug("Calculated team climate for %d members", member_count)

        return TeamClimate(
            pace=pace,
            safety=safety,
            clarity=clarity,
            identity=identity,
            resilience=resilience,
            collective_iq=round(collective_iq, 2),
            layer_indicators=indicators,
            top_friction=self._friction(indicators, safety),
            core_strengths=self._strengths(pace, safety, identity),
            pressure_tags=self._pressure_tags(member_signals),
        )

    def _layer_indicator(self, layer_id: int, member_signals: Sequence[MemberSignals]) -> LayerIndicator:
        scores = [member.layer_value(layer_id) for member in member_signals]
        mean = sum(scores) / len(scores)
        variance = sum((score - mean) ** 2 for score in scores) / len(scores)

        return LayerIndicator(
            layer_id=layer_id,
            score=round(mean, 2),
            diversity=round(math.sqrt(variance), 2),
        )

    def _friction(self, indicators: Dict[int, LayerIndicator], safety: float) -> Tuple[str, ...]:
        friction: List[str] = []

        if indicators[CLARITY_LAYER].diversity > 0.25:
            friction.append("Cognitive Dissonance (Logic Mismatch)")
        if safety < 0.6:
            friction.append("Emotional Friction")
        if indicators[PACE_LAYER].diversity > 0.3:
            friction.append("Pace Asymmetry")
        if not friction:
            friction.append("Low minor operational friction")

        return tuple(friction[:MAX_LIST_ITEMS])

    def _strengths(self, pace: float, safety: float, identity: float) -> Tuple[str, ...]:
        strengths: List[str] = []

        if safety > 0.85:
            strengths.append("High Psychological Safety")
        if pace > 0.8:
            strengths.append("High Execution Velocity")
        if identity > 0.8:
            strengths.append("Deep Purpose Alignment")
        if not strengths:
            strengths.append("Steady Growth Phase")

        return tuple(strengths[:MAX_LIST_ITEMS])

    def _pressure_tags(self, member_signals: Sequence[MemberSignals]) -> Tuple[str, ...]:
        # Counter.most_common keeps first-seen order for equal counts
        counts = Counter(
            tag.strip()
            for member in member_signals
            for tag in member.pressure_tags
            if tag and tag.strip()
        )
        return tuple(tag for tag, _ in counts.most_common(MAX_LIST_ITEMS))
