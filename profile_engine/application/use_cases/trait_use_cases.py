"""Trait refinement use cases."""

from typing import Iterable, Mapping, Sequence, Union

from ...domain.entities import RefinementEvent, RefinementOutput
from ...domain.services import TraitRefinementService
from ...domain.value_objects import TraitScore
from ..dto import TraitScoreDTO, TraitVectorDTO

PersistedTrait = Union[TraitScore, Mapping[str, float]]


class RefineTraitsUseCase:
    """Use case for refining a persisted trait vector from an event stream."""

    def __init__(self, trait_refinement_service: TraitRefinementService):
        self.trait_refinement_service = trait_refinement_service

    def execute(
        self,
        user_id: str,
        current_traits: Sequence[PersistedTrait],
        events: Iterable[RefinementEvent]
    ) -> TraitVectorDTO:
        """Apply events in order and return the vector to persist.

        Events for one user must be supplied already serialized; the caller
        stores the returned vector and passes it back on the next call.
        """
        traits = [
            trait if isinstance(trait, TraitScore) else TraitScore.from_dict(trait)
            for trait in current_traits
        ]
        output = self.trait_refinement_service.replay(user_id, traits, events)
        return self._to_vector_dto(output)

    def _to_vector_dto(self, output: RefinementOutput) -> TraitVectorDTO:
        return TraitVectorDTO(
            user_id=output.user_id,
            version=output.version,
            traits=[
                TraitScoreDTO(trait_id=trait.trait_id, score=trait.score, confidence=trait.confidence)
                for trait in output.trait_vector
            ],
            warnings=[warning.message for warning in output.warnings]
        )
