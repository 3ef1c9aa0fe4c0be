"""Group climate entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Tuple, Union

from .layer import Layer, NEUTRAL_VALUE


class SuppressionReason(Enum):
    """Why a team aggregate was withheld."""
    INSUFFICIENT_COHORT = "insufficient_cohort"
    NO_MEMBER_DATA = "no_member_data"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    SuppressionReason.INSUFFICIENT_COHORT: "insufficient data for anonymity",
    SuppressionReason.NO_MEMBER_DATA: "no member data available yet",
}


@dataclass(frozen=True)
class MemberSignals:
    """Per-member input to the team climate aggregation."""

    user_id: str
    layer_values: Mapping[int, float] = field(default_factory=dict)
    pressure_tags: Tuple[str, ...] = ()

    def layer_value(self, layer_id: int) -> float:
        """Value for a layer, falling back to the neutral prior."""
        return self.layer_values.get(layer_id, NEUTRAL_VALUE)

    @classmethod
    def from_layers(
        cls,
        user_id: str,
        layers: Mapping[int, Layer],
        pressure_tags: Tuple[str, ...] = ()
    ) -> "MemberSignals":
        """Build member signals from one user's layer table."""
        return cls(
            user_id=user_id,
            layer_values={layer_id: layer.value for layer_id, layer in layers.items()},
            pressure_tags=tuple(pressure_tags),
        )


@dataclass(frozen=True)
class LayerIndicator:
    """Team mean and spread for one layer."""

    layer_id: int
    score: float
    diversity: float


@dataclass(frozen=True)
class SuppressedClimate:
    """Aggregate withheld; carries no member-derived data."""

    reason: SuppressionReason

    @property
    def suppressed(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {"suppressed": True, "reason": self.reason.message}


@dataclass(frozen=True)
class TeamClimate:
    """Populated team-level climate indicators."""

    pace: float
    safety: float
    clarity: float
    identity: float
    resilience: float
    collective_iq: float
    layer_indicators: Dict[int, LayerIndicator]
    top_friction: Tuple[str, ...]
    core_strengths: Tuple[str, ...]
    pressure_tags: Tuple[str, ...]

    @property
    def suppressed(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {
            "suppressed": False,
            "pace": self.pace,
            "safety": self.safety,
            "clarity": self.clarity,
            "identity": self.identity,
            "resilience": self.resilience,
            "collective_iq": self.collective_iq,
            "layers": [
                {"layer_id": ind.layer_id, "score": ind.score, "diversity": ind.diversity}
                for ind in self.layer_indicators.values()
            ],
            "top_friction": list(self.top_friction),
            "core_strengths": list(self.core_strengths),
            "pressure_tags": list(self.pressure_tags),
        }


GroupClimateResult = Union[SuppressedClimate, TeamClimate]
