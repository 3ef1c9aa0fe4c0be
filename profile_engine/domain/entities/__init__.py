"""Domain entities module."""

from .answer import Answer, index_answers
from .layer import Layer, LAYER_COUNT, LAYER_IDS, NEUTRAL_VALUE, PRIOR_CONFIDENCE
from .question import Question, TraitMapping
from .insight import InsightCard
from .ritual import RitualRecommendation
from .refinement import (
    BehavioralEvent,
    BehavioralSignal,
    MissingTraitWarning,
    RefinementEvent,
    RefinementInput,
    RefinementOutput,
)
from .group_climate import (
    GroupClimateResult,
    LayerIndicator,
    MemberSignals,
    SuppressedClimate,
    SuppressionReason,
    TeamClimate,
)

__all__ = [
    "Answer",
    "index_answers",
    "Layer",
    "LAYER_COUNT",
    "LAYER_IDS",
    "NEUTRAL_VALUE",
    "PRIOR_CONFIDENCE",
    "Question",
    "TraitMapping",
    "InsightCard",
    "RitualRecommendation",
    "BehavioralEvent",
    "BehavioralSignal",
    "MissingTraitWarning",
    "RefinementEvent",
    "RefinementInput",
    "RefinementOutput",
    "GroupClimateResult",
    "LayerIndicator",
    "MemberSignals",
    "SuppressedClimate",
    "SuppressionReason",
    "TeamClimate",
]
