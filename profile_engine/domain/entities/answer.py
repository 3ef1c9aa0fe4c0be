"""Answer domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Mapping, Optional


@dataclass(frozen=True)
class Answer:
    """Single recorded response to a blueprint question."""

    user_id: str
    question_id: str
    value: Any
    answered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    derived: Optional[Mapping[str, Any]] = None

    def derived_feature(self, key: str) -> Any:
        """Get a precomputed feature, or None when absent."""
        if not self.derived:
            return None
        return self.derived.get(key)

    def has_derived(self, key: str) -> bool:
        """Check if a derived feature is present and non-empty."""
        feature = self.derived_feature(key)
        return feature is not None and feature != [] and feature != ""


def index_answers(answers: Iterable[Answer]) -> Dict[str, Answer]:
    """Key answers by question id. Later answers replace earlier ones."""
    indexed: Dict[str, Answer] = {}
    for answer in answers:
        indexed[answer.question_id] = answer
    return indexed
