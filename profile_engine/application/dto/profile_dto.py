"""Profile DTOs for application layer."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional


@dataclass
class LayerDTO:
    """DTO for a single layer."""

    id: int
    name: str
    value: float
    confidence: float
    status: str
    stability: float
    signal_density: int
    convergence_count: int
    evidence_summary: List[str] = field(default_factory=list)
    user_validation: Optional[str] = None


@dataclass
class InsightCardDTO:
    """DTO for a generated insight."""

    insight_id: str
    user_id: str
    layer_refs: List[int]
    text: str
    confidence_band: str
    created_at: datetime
    provenance: List[str] = field(default_factory=list)


@dataclass
class RitualDTO:
    """DTO for a recommended ritual."""

    ritual_id: str
    title: str
    description: str
    category: str
    duration: str


@dataclass
class LayerProfileDTO:
    """DTO for the complete layer profile response."""

    user_id: str
    layers: Dict[int, LayerDTO] = field(default_factory=dict)
    insights: List[InsightCardDTO] = field(default_factory=list)
    rituals: List[RitualDTO] = field(default_factory=list)
    unlocked_layers: List[int] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
