"""
Unit Tests: Hypothesis Generator and Ritual Recommendations

- Never-empty output with low-confidence default
- Template selection by value cut points
- Confidence band from layer confidence
- Unformed layers are ignored
"""

from datetime import datetime, timezone

import pytest

from profile_engine.domain.entities import Answer, Layer, LAYER_IDS, index_answers
from profile_engine.domain.services import HypothesisGenerator, LayerAggregator, RitualRecommendationService
from profile_engine.domain.services.layer_rules import LAYER_NAMES
from profile_engine.domain.value_objects import ConfidenceBand, LayerStatus


NOW = datetime(2024, 3, 1, 12, 0, 0)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def generator():
    return HypothesisGenerator()


@pytest.fixture
def rituals():
    return RitualRecommendationService()


def layer_table(**overrides):
    """Fifteen unformed layers; overrides keyed like layer_1={"value": 0.9, ...}"""
    layers = {layer_id: Layer(id=layer_id, name=LAYER_NAMES[layer_id]) for layer_id in LAYER_IDS}
    for key, attrs in overrides.items():
        layer = layers[int(key.split("_")[1])]
        for name, value in attrs.items():
            setattr(layer, name, value)
    return layers


# ============================================================================
# DEFAULT INSIGHT
# ============================================================================

def test_all_unformed_yields_single_default(generator):
    insights = generator.generate_hypotheses(layer_table(), now=NOW)

    assert len(insights) == 1
    default = insights[0]
    assert default.confidence_band is ConfidenceBand.LOW
    assert default.layer_refs == [1, 2]
    assert default.provenance == ["initial_seed"]
    assert default.created_at == NOW


def test_unlocked_but_neutral_layers_yield_default(generator):
    layers = layer_table(
        layer_1={"status": LayerStatus.DEVELOPED, "value": 0.6},
        layer_3={"status": LayerStatus.INTEGRATED, "value": 0.5},
    )

    insights = generator.generate_hypotheses(layers)

    assert len(insights) == 1
    assert insights[0].confidence_band is ConfidenceBand.LOW


def test_integrated_layers_without_value_signal_yield_default(generator):
    answers = index_answers([
        Answer(user_id="user-1", question_id=f"BLUEPRINT.{n:02d}", value="x", answered_at=NOW)
        for n in (7, 9, 10, 11, 12, 13)
    ])
    layers = LayerAggregator().calculate_layers(answers)

    insights = generator.generate_hypotheses(layers, now=NOW)

    assert all(layers[layer_id].is_unlocked for layer_id in (3, 4, 5))
    assert all(layers[layer_id].value == 0.5 for layer_id in (3, 4, 5))
    assert [card.provenance for card in insights] == [["initial_seed"]]


@pytest.mark.parametrize("value", [0.0, 0.3, 0.5, 0.7, 0.85, 1.0])
@pytest.mark.parametrize("status", list(LayerStatus))
def test_never_returns_empty_list(generator, value, status):
    layers = layer_table(**{f"layer_{i}": {"status": status, "value": value} for i in LAYER_IDS})

    assert generator.generate_hypotheses(layers)


# ============================================================================
# TEMPLATES
# ============================================================================

def test_high_core_disposition(generator):
    layers = layer_table(layer_1={"status": LayerStatus.EMERGING, "value": 0.9})

    insights = generator.generate_hypotheses(layers, user_id="user-7")

    assert len(insights) == 1
    assert insights[0].layer_refs == [1]
    assert "energy resilience" in insights[0].text
    assert insights[0].user_id == "user-7"
    assert insights[0].provenance == ["baseline_response"]


def test_low_core_disposition(generator):
    layers = layer_table(layer_1={"status": LayerStatus.EMERGING, "value": 0.2})

    insights = generator.generate_hypotheses(layers)

    assert "low-friction" in insights[0].text


def test_energy_orientation_needs_value_above_cut(generator):
    at_cut = layer_table(layer_2={"status": LayerStatus.DEVELOPED, "value": 0.8})
    above = layer_table(layer_2={"status": LayerStatus.DEVELOPED, "value": 0.81})

    assert generator.generate_hypotheses(at_cut)[0].confidence_band is ConfidenceBand.LOW
    insight = generator.generate_hypotheses(above)[0]
    assert insight.layer_refs == [2]
    assert insight.provenance == ["lexical_descriptor"]


def test_unformed_layer_is_skipped_even_with_extreme_value(generator):
    layers = layer_table(layer_1={"status": LayerStatus.UNFORMED, "value": 1.0})

    assert generator.generate_hypotheses(layers)[0].layer_refs == [1, 2]


def test_one_card_per_qualifying_layer_in_layer_order(generator):
    layers = layer_table(
        layer_9={"status": LayerStatus.DEVELOPED, "value": 0.8},
        layer_1={"status": LayerStatus.EMERGING, "value": 0.2},
        layer_14={"status": LayerStatus.INTEGRATED, "value": 0.1},
    )

    insights = generator.generate_hypotheses(layers)

    assert [insight.layer_refs for insight in insights] == [[1], [9], [14]]
    assert len({insight.insight_id for insight in insights}) == 3


# ============================================================================
# CONFIDENCE BANDS
# ============================================================================

def test_band_is_high_above_point_eight(generator):
    layers = layer_table(layer_1={"status": LayerStatus.INTEGRATED, "value": 0.9, "confidence": 0.95})

    assert generator.generate_hypotheses(layers)[0].confidence_band is ConfidenceBand.HIGH


def test_band_is_medium_at_point_eight(generator):
    layers = layer_table(layer_1={"status": LayerStatus.INTEGRATED, "value": 0.9, "confidence": 0.8})

    assert generator.generate_hypotheses(layers)[0].confidence_band is ConfidenceBand.MEDIUM


# ============================================================================
# RITUALS
# ============================================================================

def test_low_core_value_recommends_reset(rituals):
    layers = layer_table(layer_1={"value": 0.3})

    assert [r.ritual_id for r in rituals.recommend(layers)] == ["ritual-reset"]


def test_high_energy_value_recommends_reflection(rituals):
    layers = layer_table(layer_1={"value": 0.3}, layer_2={"value": 0.8})

    assert [r.ritual_id for r in rituals.recommend(layers)] == ["ritual-reset", "ritual-reflection"]


def test_neutral_profile_recommends_daily_pulse(rituals):
    recommendations = rituals.recommend(layer_table())

    assert len(recommendations) == 1
    assert recommendations[0].title == "Daily Pulse"


def test_single_energy_answer_does_not_trigger_reflection(rituals):
    answers = index_answers([
        Answer(user_id="user-1", question_id="BLUEPRINT.04", value="High", answered_at=NOW)
    ])

    layers = LayerAggregator().calculate_layers(answers)

    assert [r.ritual_id for r in rituals.recommend(layers)] == ["ritual-checkin"]


def test_paired_energy_answers_trigger_reflection(rituals):
    answers = index_answers([
        Answer(user_id="user-1", question_id="BLUEPRINT.04", value="High", answered_at=NOW),
        Answer(user_id="user-1", question_id="BLUEPRINT.05", value="yes", answered_at=NOW),
    ])

    layers = LayerAggregator().calculate_layers(answers)

    assert [r.ritual_id for r in rituals.recommend(layers)] == ["ritual-reflection"]


def test_timestamps_default_to_aware_utc(generator):
    insight = generator.generate_hypotheses(layer_table())[0]
    answer = Answer(user_id="user-1", question_id="BLUEPRINT.01", value="x")

    assert insight.created_at.tzinfo is timezone.utc
    assert answer.answered_at.tzinfo is timezone.utc
