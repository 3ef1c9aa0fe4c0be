"""Dependency injection container."""

import logging
from functools import lru_cache
from typing import Any, Dict

from ..application.use_cases import (
    BuildLayerProfileUseCase,
    CalculateTeamClimateUseCase,
    RefineTraitsUseCase,
)
from ..domain.services import (
    GroupClimateService,
    HypothesisGenerator,
    LayerAggregator,
    RitualRecommendationService,
    TraitRefinementService,
)
from ..infrastructure.catalog import QuestionCatalog, load_default_catalog
from ..monitoring import setup_logging
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._instances: Dict[str, Any] = {}
        self._initialized = False

    def initialize(self) -> None:
        """Load the catalog and wire all services."""
        if self._initialized:
            return

        try:
            self._register_infrastructure()
            self._register_domain_services()
            self._register_use_cases()
        except Exception as e:
            logger.error(f"Failed to initialize container: {e}")
            raise

        self._initialized = True
        logger.info("Dependency injection container initialized")

    def _register_infrastructure(self) -> None:
        if self.settings.question_catalog_path:
            catalog = QuestionCatalog.load(self.settings.question_catalog_path)
        else:
            catalog = load_default_catalog()
        self._instances["question_catalog"] = catalog

    def _register_domain_services(self) -> None:
        self._instances["layer_aggregator"] = LayerAggregator()
        self._instances["hypothesis_generator"] = HypothesisGenerator()
        self._instances["ritual_recommendation_service"] = RitualRecommendationService()
        self._instances["trait_refinement_service"] = TraitRefinementService(
            catalog=self._instances["question_catalog"],
            learning_rate=self.settings.learning_rate,
            answer_reliability=self.settings.answer_reliability,
            answer_confidence_step=self.settings.answer_confidence_step,
            event_confidence_step=self.settings.event_confidence_step
        )
        self._instances["group_climate_service"] = GroupClimateService(
            min_cohort_size=self.settings.min_cohort_size
        )

    def _register_use_cases(self) -> None:
        self._instances["build_layer_profile"] = BuildLayerProfileUseCase(
            layer_aggregator=self._instances["layer_aggregator"],
            hypothesis_generator=self._instances["hypothesis_generator"],
            ritual_recommendation_service=self._instances["ritual_recommendation_service"]
        )
        self._instances["refine_traits"] = RefineTraitsUseCase(
            trait_refinement_service=self._instances["trait_refinement_service"]
        )
        self._instances["calculate_team_climate"] = CalculateTeamClimateUseCase(
            layer_aggregator=self._instances["layer_aggregator"],
            group_climate_service=self._instances["group_climate_service"]
        )

    def get(self, service_name: str) -> Any:
        """Get service instance."""
        if not self._initialized:
            raise RuntimeError("Container not initialized")

        instance = self._instances.get(service_name)
        if instance is None:
            raise ValueError(f"Service '{service_name}' not found")

        return instance


@lru_cache()
def get_container() -> Container:
    """Get the process-wide container, initialized from settings."""
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.json_logs)

    container = Container(settings)
    container.initialize()
    return container
