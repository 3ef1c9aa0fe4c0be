"""Response normalization for refinement questions."""

from typing import Union

from ..exceptions import ValidationError
from ..value_objects import QuestionType

LIKERT_NEUTRAL_INDEX = 2
LIKERT_MAX_INDEX = 4

EITHER_OR_SCORES = {"A": -1.0, "B": 1.0}

ResponseValue = Union[int, str]


def normalize_response(response: ResponseValue, question_type) -> float:
    """Map a discrete response onto [-1, +1].

    likert_5 indices 0..4 map to -1, -0.5, 0, 0.5, 1 (2 is neutral);
    either_or maps A to -1 and B to +1.
    """
    question_type = QuestionType.parse(question_type)

    if question_type is QuestionType.LIKERT_5:
        if isinstance(response, bool) or not isinstance(response, int):
            raise ValidationError("likert response", response, "must be an integer index 0-4")
        if not (0 <= response <= LIKERT_MAX_INDEX):
            raise ValidationError("likert response", response, "must be between 0 and 4")
        return (response - LIKERT_NEUTRAL_INDEX) / LIKERT_NEUTRAL_INDEX

    if response not in EITHER_OR_SCORES:
        raise ValidationError("either/or response", response, "must be 'A' or 'B'")
    return EITHER_OR_SCORES[response]
