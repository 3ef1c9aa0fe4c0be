"""Trait refinement domain service."""

from typing import Dict, Iterable, List, Sequence

import structlog

from ..entities import (
    BehavioralEvent,
    BehavioralSignal,
    MissingTraitWarning,
    RefinementEvent,
    RefinementInput,
    RefinementOutput,
)
from ..exceptions import QuestionNotFoundError, ValidationError
from ..repositories import IQuestionCatalog
from ..value_objects import TraitScore
from .response_normalizer import normalize_response

logger = structlog.get_logger(__name__)

LEARNING_RATE = 0.15
ANSWER_RELIABILITY = 0.7
ANSWER_CONFIDENCE_STEP = 0.02
EVENT_CONFIDENCE_STEP = 0.01
SCORE_SCALE = 100

BEHAVIORAL_SOURCE = "behavioral_event"


class TraitRefinementService:
    """Applies answer- and event-sourced deltas to a trait vector.

    The service holds no per-user state. Every call takes the caller's current
    vector and returns a new one; the input list and its TraitScore objects
    are never modified. Replaying the same ordered events against the same
    starting vector always yields the same result.
    """

    def __init__(
        self,
        catalog: IQuestionCatalog,
        learning_rate: float = LEARNING_RATE,
        answer_reliability: float = ANSWER_RELIABILITY,
        answer_confidence_step: float = ANSWER_CONFIDENCE_STEP,
        event_confidence_step: float = EVENT_CONFIDENCE_STEP
    ):
        self.catalog = catalog
        self.learning_rate = learning_rate
        self.answer_reliability = answer_reliability
        self.answer_confidence_step = answer_confidence_step
        self.event_confidence_step = event_confidence_step

    def refine_from_answer(
        self,
        refinement_input: RefinementInput,
        current_traits: Sequence[TraitScore]
    ) -> RefinementOutput:
        """Refine the vector from an explicit blueprint answer.

        Raises QuestionNotFoundError or UnsupportedQuestionTypeError before any
        trait is touched, so a raised error always means no update occurred.
        """
        question = self.catalog.get(refinement_input.question_id)
        if question is None:
            raise QuestionNotFoundError(refinement_input.question_id)

        response_score = normalize_response(refinement_input.response, question.type)

        updated = list(current_traits)
        positions = self._index(updated)
        warnings: List[MissingTraitWarning] = []

        for mapping in question.maps_to:
            position = positions.get(mapping.trait_id)
            if position is None:
                warnings.append(self._missing_trait(
                    refinement_input.user_id, mapping.trait_id, question.question_id
                ))
                continue

            delta = mapping.weight * response_score * self.learning_rate * SCORE_SCALE
            updated[position] = updated[position].adjusted(
                delta * self.answer_reliability, self.answer_confidence_step
            )

        return RefinementOutput(
            user_id=refinement_input.user_id,
            trait_vector=updated,
            warnings=warnings
        )

    def refine_from_event(
        self,
        user_id: str,
        signals: Iterable[BehavioralSignal],
        current_traits: Sequence[TraitScore]
    ) -> RefinementOutput:
        """Refine the vector from pre-computed behavioral signals."""
        signals = list(signals)
        for signal in signals:
            if not (0.0 <= signal.reliability <= 1.0):
                raise ValidationError("reliability", signal.reliability, "must be between 0.0 and 1.0")

        updated = list(current_traits)
        positions = self._index(updated)
        warnings: List[MissingTraitWarning] = []

        for signal in signals:
            position = positions.get(signal.trait_id)
            if position is None:
                warnings.append(self._missing_trait(user_id, signal.trait_id, BEHAVIORAL_SOURCE))
                continue

            updated[position] = updated[position].adjusted(
                signal.delta * signal.reliability, self.event_confidence_step
            )

        return RefinementOutput(user_id=user_id, trait_vector=updated, warnings=warnings)

    def replay(
        self,
        user_id: str,
        initial_traits: Sequence[TraitScore],
        events: Iterable[RefinementEvent]
    ) -> RefinementOutput:
        """Apply an ordered event stream and return the final vector.

        Warnings from every step are accumulated. A configuration error on any
        event aborts the replay and propagates.
        """
        traits = list(initial_traits)
        warnings: List[MissingTraitWarning] = []

        for event in events:
            if isinstance(event, RefinementInput):
                output = self.refine_from_answer(event, traits)
            elif isinstance(event, BehavioralEvent):
                output = self.refine_from_event(event.user_id, event.signals, traits)
            else:
                raise ValidationError("event", type(event).__name__, "unknown refinement event type")

            traits = output.trait_vector
            warnings.extend(output.warnings)

        return RefinementOutput(user_id=user_id, trait_vector=traits, warnings=warnings)

    @staticmethod
    def _index(traits: Sequence[TraitScore]) -> Dict[str, int]:
        positions: Dict[str, int] = {}
        for position, trait in enumerate(traits):
            positions.setdefault(trait.trait_id, position)
        return positions

    @staticmethod
    def _missing_trait(user_id: str, trait_id: str, source: str) -> MissingTraitWarning:
        logger.warning("trait_not_found_in_vector", user_id=user_id, trait_id=trait_id, source=source)
        return MissingTraitWarning(trait_id=trait_id, source=source)
