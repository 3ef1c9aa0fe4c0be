"""Domain services module."""

from .response_normalizer import normalize_response
from .unlock_evaluator import evaluate_unlock, threshold_for
from .layer_aggregator import LayerAggregator
from .hypothesis_generator import HypothesisGenerator
from .ritual_recommendation_service import RitualRecommendationService
from .trait_refinement_service import TraitRefinementService
from .group_climate_service import GroupClimateService

__all__ = [
    "normalize_response",
    "evaluate_unlock",
    "threshold_for",
    "LayerAggregator",
    "HypothesisGenerator",
    "RitualRecommendationService",
    "TraitRefinementService",
    "GroupClimateService",
]
