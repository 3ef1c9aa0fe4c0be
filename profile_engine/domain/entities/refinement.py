"""Trait refinement inputs and outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple, Union

from ..value_objects import TraitScore

REFINEMENT_VERSION = "v0"


@dataclass(frozen=True)
class RefinementInput:
    """Blueprint answer submitted for refinement."""

    user_id: str
    question_id: str
    response: Union[int, str]  # Likert index (0-4) or either/or token
    answered_at: Optional[datetime] = None


@dataclass(frozen=True)
class BehavioralSignal:
    """Pre-computed trait delta from passive observation."""

    trait_id: str
    delta: float
    reliability: float


@dataclass(frozen=True)
class BehavioralEvent:
    """Batch of behavioral signals for one user."""

    user_id: str
    signals: Tuple[BehavioralSignal, ...]
    occurred_at: Optional[datetime] = None


RefinementEvent = Union[RefinementInput, BehavioralEvent]


@dataclass(frozen=True)
class MissingTraitWarning:
    """A mapping or signal referenced a trait absent from the vector."""

    trait_id: str
    source: str  # question id or "behavioral_event"

    @property
    def message(self) -> str:
        return f"Trait not found in vector: {self.trait_id} (source: {self.source})"


@dataclass
class RefinementOutput:
    """Updated trait vector plus non-fatal diagnostics."""

    user_id: str
    trait_vector: List[TraitScore]
    version: str = REFINEMENT_VERSION
    warnings: List[MissingTraitWarning] = field(default_factory=list)

    def score_for(self, trait_id: str) -> Optional[TraitScore]:
        for trait in self.trait_vector:
            if trait.trait_id == trait_id:
                return trait
        return None

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "version": self.version,
            "trait_vector": [trait.to_dict() for trait in self.trait_vector],
            "warnings": [warning.message for warning in self.warnings],
        }
