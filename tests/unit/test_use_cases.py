"""
Unit Tests: Application Use Cases

- Layer profile assembly (layers, insights, rituals)
- Trait refinement from persisted vectors
- Team climate with the cohort gate ahead of aggregation
"""

from datetime import datetime

import pytest

from profile_engine.application.use_cases import (
    BuildLayerProfileUseCase,
    CalculateTeamClimateUseCase,
    RefineTraitsUseCase,
)
from profile_engine.domain.entities import Answer, BehavioralEvent, BehavioralSignal, RefinementInput
from profile_engine.domain.exceptions import QuestionNotFoundError
from profile_engine.domain.services import (
    GroupClimateService,
    HypothesisGenerator,
    LayerAggregator,
    RitualRecommendationService,
    TraitRefinementService,
)
from profile_engine.infrastructure.catalog import load_default_catalog


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def build_profile():
    return BuildLayerProfileUseCase(
        layer_aggregator=LayerAggregator(),
        hypothesis_generator=HypothesisGenerator(),
        ritual_recommendation_service=RitualRecommendationService()
    )


@pytest.fixture
def refine_traits():
    return RefineTraitsUseCase(TraitRefinementService(load_default_catalog()))


@pytest.fixture
def team_climate():
    return CalculateTeamClimateUseCase(
        layer_aggregator=LayerAggregator(),
        group_climate_service=GroupClimateService()
    )


def answer(question_id, value="x", derived=None, user_id="user-1"):
    return Answer(
        user_id=user_id,
        question_id=question_id,
        value=value,
        answered_at=datetime(2024, 1, 1),
        derived=derived
    )


# ============================================================================
# LAYER PROFILE
# ============================================================================

def test_profile_for_core_disposition(build_profile):
    answers = [
        answer("BLUEPRINT.01", derived={"clean_tokens": ["calm", "focused", "curious", "warm", "steady"]}),
        answer("BLUEPRINT.02", "work"),
        answer("BLUEPRINT.03", "A typical day starts early..."),
    ]

    profile = build_profile.execute("user-1", answers)

    assert profile.user_id == "user-1"
    assert sorted(profile.layers) == list(range(1, 16))
    assert profile.layers[1].status == "developed"
    assert profile.unlocked_layers == [1]
    assert len(profile.insights) == 1
    assert profile.insights[0].layer_refs == [1]
    assert profile.insights[0].user_id == "user-1"
    assert [ritual.ritual_id for ritual in profile.rituals] == ["ritual-checkin"]


def test_profile_without_answers_gets_default_insight(build_profile):
    profile = build_profile.execute("user-2", {})

    assert profile.unlocked_layers == []
    assert len(profile.insights) == 1
    assert profile.insights[0].layer_refs == [1, 2]
    assert profile.insights[0].confidence_band == "low"
    assert profile.rituals


# ============================================================================
# TRAIT REFINEMENT
# ============================================================================

def test_refine_persisted_vector(refine_traits):
    persisted = [
        {"trait_id": "social_energy", "score": 50.0, "confidence": 0.5},
        {"trait_id": "directness", "score": 40.0, "confidence": 0.3},
    ]
    events = [RefinementInput(user_id="user-1", question_id="BPQ.L02.001", response=4)]

    vector = refine_traits.execute("user-1", persisted, events)

    scores = {trait.trait_id: trait for trait in vector.traits}
    assert scores["social_energy"].score == pytest.approx(60.5)
    assert scores["social_energy"].confidence == pytest.approx(0.52)
    assert scores["directness"].score == 40.0
    assert vector.version == "v0"
    assert vector.warnings == []
    assert persisted[0]["score"] == 50.0


def test_refine_reports_missing_traits(refine_traits):
    events = [BehavioralEvent(
        user_id="user-1",
        signals=(BehavioralSignal(trait_id="unknown_trait", delta=5.0, reliability=1.0),)
    )]

    vector = refine_traits.execute("user-1", [{"trait_id": "directness", "score": 40.0, "confidence": 0.3}], events)

    assert vector.traits[0].score == 40.0
    assert vector.warnings == ["Trait not found in vector: unknown_trait (source: behavioral_event)"]


def test_refine_unknown_question_propagates(refine_traits):
    with pytest.raises(QuestionNotFoundError):
        refine_traits.execute(
            "user-1",
            [],
            [RefinementInput(user_id="user-1", question_id="BPQ.MISSING", response=2)]
        )


# ============================================================================
# TEAM CLIMATE
# ============================================================================

class ExplodingAnswers:
    def items(self):
        raise AssertionError("member answers must not be read for small cohorts")


def test_small_cohort_is_suppressed_before_aggregation(team_climate):
    result = team_climate.execute(ExplodingAnswers(), member_count=4)

    assert result.suppressed is True
    assert result.to_dict() == {"suppressed": True, "reason": "insufficient data for anonymity"}


def test_cohort_of_five_produces_climate(team_climate):
    members = {f"user-{i}": [] for i in range(5)}
    tags = {"user-0": ["Deadlines"], "user-1": ["Deadlines", "Scope creep"]}

    result = team_climate.execute(members, member_count=5, pressure_tags=tags)

    assert result.suppressed is False
    assert result.pace == 0.5
    assert result.safety == 0.5
    assert "Emotional Friction" in result.top_friction
    assert result.core_strengths == ("Steady Growth Phase",)
    assert result.pressure_tags == ("Deadlines", "Scope creep")
