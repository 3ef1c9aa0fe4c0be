"""Static layer configuration.

Every per-layer rule the aggregator, unlock evaluator and hypothesis generator
apply lives in the lookup tables below, keyed by layer id:

- ``LAYER_NAMES``: canonical layer names
- ``LAYER_SIGNALS``: contributing question ids (each present answer adds density)
- ``CORROBORATION_RULES``: answer combinations that add convergence
- ``PRIMARY_SIGNALS``: the answer that overrides the neutral layer value
- ``UNLOCK_THRESHOLDS``: density/convergence/stability minimums per layer
- ``HYPOTHESIS_TEMPLATES``: value cut points and narrative templates
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from ..entities import Answer, NEUTRAL_VALUE


LAYER_NAMES: Dict[int, str] = {
    1: "Core Disposition",
    2: "Energy Orientation",
    3: "Perception & Information Processing",
    4: "Decision Logic",
    5: "Motivational Drivers",
    6: "Stress & Pressure Patterns",
    7: "Emotional Regulation & Expression",
    8: "Behavioural Rhythm & Execution",
    9: "Communication Mode",
    10: "Relational Energy & Boundaries",
    11: "Relational Patterning",
    12: "Social Role & Influence Expression",
    13: "Identity Coherence & Maturity",
    14: "Growth Arc & Learning Orientation",
    15: "Life Navigation & Current Edge",
}


def _blueprint(*numbers: int) -> Tuple[str, ...]:
    return tuple(f"BLUEPRINT.{n:02d}" for n in numbers)


LAYER_SIGNALS: Dict[int, Tuple[str, ...]] = {
    1: _blueprint(1, 2, 3),
    2: _blueprint(4, 5, 6),
    3: _blueprint(7, 8, 9),
    4: _blueprint(10, 11),
    5: _blueprint(12, 13),
    6: _blueprint(14, 15, 16),
    7: _blueprint(17, 18, 19),
    8: _blueprint(20, 21, 22),
    9: _blueprint(23, 24),
    10: _blueprint(25, 26),
    11: _blueprint(27, 28, 29),
    12: _blueprint(30, 31),
    13: _blueprint(32, 33, 34),
    14: _blueprint(35, 36, 37),
    15: _blueprint(38, 39, 40),
}


# ============================================================================
# CORROBORATION
# ============================================================================

@dataclass(frozen=True)
class CorroborationRule:
    """Binary corroboration: all required answers present."""

    requires: Tuple[str, ...]
    convergence: int = 1
    stability: Optional[float] = None
    derived_key: Optional[str] = None  # must be present on requires[0]
    evidence: Optional[str] = None

    def is_satisfied(self, answers: Mapping[str, Answer]) -> bool:
        if not all(question_id in answers for question_id in self.requires):
            return False

        if self.derived_key is not None:
            return answers[self.requires[0]].has_derived(self.derived_key)

        return True


CORROBORATION_RULES: Dict[int, Tuple[CorroborationRule, ...]] = {
    1: (
        CorroborationRule(_blueprint(1), convergence=1, stability=0.7, derived_key="clean_tokens"),
        CorroborationRule(
            _blueprint(3), convergence=1,
            evidence="Narrative typical day analysis integrated."
        ),
    ),
    2: (CorroborationRule(_blueprint(4, 5), convergence=2, stability=0.65),),
    3: (CorroborationRule(_blueprint(7, 9), convergence=2, stability=0.6),),
    4: (CorroborationRule(_blueprint(10, 11), convergence=2, stability=0.7),),
    5: (CorroborationRule(_blueprint(12, 13), convergence=2, stability=0.8),),
    6: (CorroborationRule(_blueprint(14, 15), convergence=2, stability=0.6),),
    7: (
        CorroborationRule(_blueprint(17, 18), convergence=2, stability=0.65),
        CorroborationRule(
            _blueprint(19), convergence=1,
            evidence="Emotional expression reflection integrated."
        ),
    ),
    8: (CorroborationRule(_blueprint(20, 22), convergence=2, stability=0.7),),
    9: (CorroborationRule(_blueprint(23, 24), convergence=2, stability=0.6),),
    10: (CorroborationRule(_blueprint(25, 26), convergence=2, stability=0.55),),
    11: (
        CorroborationRule(_blueprint(27, 28), convergence=2, stability=0.6),
        CorroborationRule(
            _blueprint(29), convergence=1, stability=0.7,
            evidence="Relationship pattern narrative integrated."
        ),
    ),
    12: (CorroborationRule(_blueprint(30, 31), convergence=2, stability=0.65),),
    13: (
        CorroborationRule(_blueprint(32, 33), convergence=1, stability=0.7),
        CorroborationRule(
            _blueprint(32, 34), convergence=1, stability=0.8,
            evidence="Self-description consistent across contexts."
        ),
    ),
    14: (
        CorroborationRule(_blueprint(35, 36), convergence=1, stability=0.7),
        CorroborationRule(
            _blueprint(37), convergence=1, stability=0.75,
            evidence="Learning reflection integrated."
        ),
    ),
    15: (CorroborationRule(_blueprint(38, 39, 40), convergence=2, stability=0.85),),
}

CONFIDENCE_PER_CONVERGENCE = 0.15


# ============================================================================
# PRIMARY SIGNALS
# ============================================================================

class SignalKind(Enum):
    """How a primary signal answer is turned into a layer value."""
    TOKEN_COUNT = "token_count"
    ENUM = "enum"
    SCALE = "scale"


@dataclass(frozen=True)
class PrimarySignal:
    """Answer that overrides the neutral layer value."""

    question_id: str
    kind: SignalKind
    derived_key: Optional[str] = None
    denominator: float = 1.0
    mapping: Mapping[str, float] = field(default_factory=dict)
    default: float = NEUTRAL_VALUE
    scale_min: float = 1.0
    scale_max: float = 5.0
    requires: Tuple[str, ...] = ()

    def is_available(self, answers: Mapping[str, Answer]) -> bool:
        """Check the primary answer and any companion answers are present."""
        return self.question_id in answers and all(qid in answers for qid in self.requires)

    def value_for(self, answer: Answer) -> Optional[float]:
        """Layer value for the answer, or None when it carries no usable signal."""
        if self.kind is SignalKind.TOKEN_COUNT:
            count = _token_count(answer.derived_feature(self.derived_key))
            if not count:
                return None
            return min(1.0, count / self.denominator)

        if self.kind is SignalKind.ENUM:
            # list and other non-token payloads fall back to the default
            if not isinstance(answer.value, str):
                return self.default
            return self.mapping.get(answer.value, self.default)

        if isinstance(answer.value, bool) or not isinstance(answer.value, (int, float)):
            return None
        span = self.scale_max - self.scale_min
        return max(0.0, min(1.0, (answer.value - self.scale_min) / span))


def _token_count(feature: Any) -> float:
    """Token count from a precomputed count or a token sequence."""
    if feature is None or isinstance(feature, bool):
        return 0
    if isinstance(feature, (int, float)):
        return feature
    if isinstance(feature, (list, tuple)):
        return len(feature)
    return 0


PRIMARY_SIGNALS: Dict[int, PrimarySignal] = {
    1: PrimarySignal("BLUEPRINT.01", SignalKind.TOKEN_COUNT, derived_key="clean_tokens", denominator=5),
    2: PrimarySignal(
        "BLUEPRINT.04", SignalKind.ENUM,
        mapping={"High": 0.8}, default=0.4, requires=("BLUEPRINT.05",)
    ),
    6: PrimarySignal("BLUEPRINT.14", SignalKind.SCALE),
    7: PrimarySignal("BLUEPRINT.17", SignalKind.SCALE),
    8: PrimarySignal("BLUEPRINT.20", SignalKind.SCALE),
    9: PrimarySignal(
        "BLUEPRINT.23", SignalKind.ENUM,
        mapping={"Direct": 0.8, "Balanced": 0.5, "Diplomatic": 0.3}
    ),
    10: PrimarySignal("BLUEPRINT.25", SignalKind.SCALE),
    11: PrimarySignal("BLUEPRINT.27", SignalKind.SCALE),
    12: PrimarySignal(
        "BLUEPRINT.30", SignalKind.ENUM,
        mapping={"Lead": 0.85, "Bridge": 0.6, "Support": 0.35}
    ),
    13: PrimarySignal("BLUEPRINT.33", SignalKind.SCALE),
    14: PrimarySignal("BLUEPRINT.35", SignalKind.SCALE),
    15: PrimarySignal("BLUEPRINT.38", SignalKind.SCALE),
}


# ============================================================================
# UNLOCK THRESHOLDS
# ============================================================================

@dataclass(frozen=True)
class UnlockThreshold:
    convergence_min: int
    stability_min: float
    density_min: int


_FOUNDATION = UnlockThreshold(convergence_min=2, stability_min=0.6, density_min=2)
_DYNAMICS = UnlockThreshold(convergence_min=2, stability_min=0.5, density_min=2)
_RELATIONAL = UnlockThreshold(convergence_min=2, stability_min=0.4, density_min=2)
_IDENTITY = UnlockThreshold(convergence_min=2, stability_min=0.7, density_min=3)

UNLOCK_THRESHOLDS: Dict[int, UnlockThreshold] = {
    1: _FOUNDATION,
    2: _FOUNDATION,
    3: _FOUNDATION,
    4: _FOUNDATION,
    5: _FOUNDATION,
    6: _DYNAMICS,
    7: _DYNAMICS,
    8: _DYNAMICS,
    9: _DYNAMICS,
    10: _RELATIONAL,
    11: _RELATIONAL,
    12: _RELATIONAL,
    13: _IDENTITY,
    14: _IDENTITY,
    15: UnlockThreshold(convergence_min=2, stability_min=0.8, density_min=3),
}

INTEGRATED_STABILITY = 0.8
DEVELOPED_STABILITY = 0.6


# ============================================================================
# HYPOTHESIS TEMPLATES
# ============================================================================

class Comparison(Enum):
    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True)
class HypothesisTemplate:
    """Narrative selected when a layer value crosses a cut point."""

    comparison: Comparison
    cut: float
    text: str
    provenance: Tuple[str, ...] = ("baseline_response",)

    def matches(self, value: float) -> bool:
        if self.comparison is Comparison.ABOVE:
            return value > self.cut
        return value < self.cut


def _above(cut: float, text: str, *provenance: str) -> HypothesisTemplate:
    return HypothesisTemplate(Comparison.ABOVE, cut, text, provenance or ("baseline_response",))


def _below(cut: float, text: str, *provenance: str) -> HypothesisTemplate:
    return HypothesisTemplate(Comparison.BELOW, cut, text, provenance or ("baseline_response",))


# Layers 3-5 have no primary signal, so their value stays at the neutral
# prior and no cut point could ever match; they carry no templates.
HYPOTHESIS_TEMPLATES: Dict[int, Tuple[HypothesisTemplate, ...]] = {
    1: (
        _above(0.7, "You demonstrate high energy resilience, likely processing pressure as a "
                    "catalyst for focus rather than a drain."),
        _below(0.5, "Your energy processing suggests a preference for stable, low-friction "
                    "environments to maintain peak cognitive performance."),
    ),
    2: (
        _above(0.8, "You have a highly articulated sense of self-identity, using precise "
                    "descriptors to navigate your internal state.", "lexical_descriptor"),
    ),
    6: (
        _above(0.7, "Pressure seems to sharpen your attention; deadlines tend to narrow your "
                    "focus rather than scatter it."),
        _below(0.4, "Sustained pressure appears to wear on you quickly; recovery time is "
                    "likely an important part of your rhythm."),
    ),
    7: (
        _above(0.7, "You tend to name and express emotions openly, which helps you process "
                    "them close to when they arise."),
        _below(0.4, "You appear to hold emotions privately and process them internally before "
                    "sharing."),
    ),
    8: (
        _above(0.7, "You work in steady, structured cycles and rely on routine to carry "
                    "execution forward."),
        _below(0.4, "Your execution seems to come in bursts, driven more by momentum than "
                    "by fixed routine."),
    ),
    9: (
        _above(0.7, "You communicate directly and prefer getting to the point, even in "
                    "difficult conversations."),
        _below(0.4, "You favour a diplomatic communication style, reading the room before "
                    "stating a position."),
    ),
    10: (
        _above(0.7, "Time with others seems to restore you; connection is a source of "
                    "energy rather than a cost.", "relational_prompt"),
        _below(0.4, "You appear to guard your relational energy carefully and need clear "
                    "boundaries to stay balanced.", "relational_prompt"),
    ),
    11: (
        _above(0.7, "Your relationships show a consistent pattern of early trust and open "
                    "engagement.", "relational_prompt"),
        _below(0.4, "You tend to build trust gradually, letting relationships prove "
                    "themselves over time.", "relational_prompt"),
    ),
    12: (
        _above(0.7, "You naturally step into visible, directive roles when a group needs "
                    "momentum."),
        _below(0.4, "You tend to influence from the background, enabling others rather than "
                    "leading from the front."),
    ),
    13: (
        _above(0.7, "Your sense of who you are appears stable across the different contexts "
                    "you move through.", "narrative_entry"),
        _below(0.4, "You may experience yourself quite differently across contexts, which "
                    "suggests identity is still actively forming.", "narrative_entry"),
    ),
    14: (
        _above(0.7, "You actively seek out stretch and treat setbacks as material for "
                    "learning.", "narrative_entry"),
        _below(0.4, "You seem to prefer consolidating what you know before taking on new "
                    "challenges.", "narrative_entry"),
    ),
    15: (
        _above(0.7, "You appear to be at a clear edge of change, with a defined sense of "
                    "the next chapter.", "narrative_entry"),
        _below(0.4, "Your current direction seems open; this may be a period of exploring "
                    "before committing.", "narrative_entry"),
    ),
}

DEFAULT_HYPOTHESIS_LAYERS = (1, 2)
DEFAULT_HYPOTHESIS_TEXT = (
    "Your digital twin foundation is emerging. We are seeing patterns of balanced energy "
    "and clear self-articulation."
)
DEFAULT_HYPOTHESIS_PROVENANCE = ("initial_seed",)
