"""Question type value objects."""

from enum import Enum

from ..exceptions import UnsupportedQuestionTypeError


class QuestionType(Enum):
    """Response types the refinement engine can normalize."""
    LIKERT_5 = "likert_5"
    EITHER_OR = "either_or"

    @classmethod
    def parse(cls, raw) -> "QuestionType":
        """Parse a catalog type string, failing hard on unknown types."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            raise UnsupportedQuestionTypeError(raw) from None
