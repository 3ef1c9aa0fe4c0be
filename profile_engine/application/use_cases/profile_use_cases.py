"""Layer profile use cases."""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ...domain.entities import (
    Answer,
    GroupClimateResult,
    InsightCard,
    Layer,
    MemberSignals,
    RitualRecommendation,
    index_answers,
)
from ...domain.services import (
    GroupClimateService,
    HypothesisGenerator,
    LayerAggregator,
    RitualRecommendationService,
)
from ..dto import InsightCardDTO, LayerDTO, LayerProfileDTO, RitualDTO

logger = logging.getLogger(__name__)

AnswerSet = Union[Mapping[str, Answer], Iterable[Answer]]


def _as_answer_map(answers: AnswerSet) -> Mapping[str, Answer]:
    if isinstance(answers, Mapping):
        return answers
    return index_answers(answers)


class BuildLayerProfileUseCase:
    """Use case for building a user's layer profile from their answers."""

    def __init__(
        self,
        layer_aggregator: LayerAggregator,
        hypothesis_generator: HypothesisGenerator,
        ritual_recommendation_service: RitualRecommendationService
    ):
        self.layer_aggregator = layer_aggregator
        self.hypothesis_generator = hypothesis_generator
        self.ritual_recommendation_service = ritual_recommendation_service

    def execute(self, user_id: str, answers: AnswerSet) -> LayerProfileDTO:
        """Aggregate layers, then derive insights and rituals from them."""
        layers = self.layer_aggregator.calculate_layers(_as_answer_map(answers))
        insights = self.hypothesis_generator.generate_hypotheses(layers, user_id=user_id)
        rituals = self.ritual_recommendation_service.recommend(layers)

        unlocked = [layer_id for layer_id, layer in sorted(layers.items()) if layer.is_unlocked]
        logger.info(f"Built layer profile for {user_id}: {len(unlocked)} layers unlocked")

        return LayerProfileDTO(
            user_id=user_id,
            layers={layer_id: self._to_layer_dto(layer) for layer_id, layer in layers.items()},
            insights=[self._to_insight_dto(insight) for insight in insights],
            rituals=[self._to_ritual_dto(ritual) for ritual in rituals],
            unlocked_layers=unlocked
        )

    def _to_layer_dto(self, layer: Layer) -> LayerDTO:
        return LayerDTO(
            id=layer.id,
            name=layer.name,
            value=layer.value,
            confidence=layer.confidence,
            status=layer.status.value,
            stability=layer.stability,
            signal_density=layer.signal_density,
            convergence_count=layer.convergence_count,
            evidence_summary=list(layer.evidence_summary),
            user_validation=layer.user_validation.value if layer.user_validation else None
        )

    def _to_insight_dto(self, insight: InsightCard) -> InsightCardDTO:
        return InsightCardDTO(
            insight_id=insight.insight_id,
            user_id=insight.user_id,
            layer_refs=list(insight.layer_refs),
            text=insight.text,
            confidence_band=insight.confidence_band.value,
            created_at=insight.created_at,
            provenance=list(insight.provenance)
        )

    def _to_ritual_dto(self, ritual: RitualRecommendation) -> RitualDTO:
        return RitualDTO(
            ritual_id=ritual.ritual_id,
            title=ritual.title,
            description=ritual.description,
            category=ritual.category,
            duration=ritual.duration
        )


class CalculateTeamClimateUseCase:
    """Use case for team climate from members' answer sets."""

    def __init__(
        self,
        layer_aggregator: LayerAggregator,
        group_climate_service: GroupClimateService
    ):
        self.layer_aggregator = layer_aggregator
        self.group_climate_service = group_climate_service

    def execute(
        self,
        member_answers: Mapping[str, AnswerSet],
        member_count: int,
        pressure_tags: Optional[Mapping[str, Sequence[str]]] = None
    ) -> GroupClimateResult:
        """Compute team climate.

        Small cohorts are rejected before any member's answers are aggregated.
        """
        if not self.group_climate_service.admits_cohort(member_count):
            return self.group_climate_service.calculate_team_climate((), member_count)

        pressure_tags = pressure_tags or {}
        members: List[MemberSignals] = []
        for user_id, answers in member_answers.items():
            layers: Dict[int, Layer] = self.layer_aggregator.calculate_layers(_as_answer_map(answers))
            members.append(MemberSignals.from_layers(
                user_id, layers, tuple(pressure_tags.get(user_id, ()))
            ))

        return self.group_climate_service.calculate_team_climate(members, member_count)
