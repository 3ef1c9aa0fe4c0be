"""Trait vector DTOs for application layer."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class TraitScoreDTO:
    """DTO for a persisted trait score."""

    trait_id: str
    score: float
    confidence: float


@dataclass
class TraitVectorDTO:
    """DTO for a refined trait vector."""

    user_id: str
    version: str
    traits: List[TraitScoreDTO] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
