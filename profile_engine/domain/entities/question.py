"""Question catalog entities."""

from dataclasses import dataclass, field
from typing import Tuple

from ..value_objects import QuestionType


@dataclass(frozen=True)
class TraitMapping:
    """Signed weight linking a question to a trait."""

    trait_id: str
    weight: float


@dataclass(frozen=True)
class Question:
    """Refinement question as declared in the catalog."""

    question_id: str
    layer: int
    type: QuestionType
    prompt: str
    maps_to: Tuple[TraitMapping, ...] = field(default_factory=tuple)

    @property
    def trait_ids(self) -> Tuple[str, ...]:
        return tuple(mapping.trait_id for mapping in self.maps_to)
