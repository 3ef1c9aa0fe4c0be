"""
Unit Tests: Response Normalizer

- Likert index table and monotonicity
- Either/or tokens
- Invalid responses and unsupported question types
"""

import pytest

from profile_engine.domain.exceptions import UnsupportedQuestionTypeError, ValidationError
from profile_engine.domain.services import normalize_response
from profile_engine.domain.value_objects import QuestionType


# ============================================================================
# LIKERT
# ============================================================================

@pytest.mark.parametrize("index, expected", [
    (0, -1.0),
    (1, -0.5),
    (2, 0.0),
    (3, 0.5),
    (4, 1.0),
])
def test_likert_maps_evenly_onto_signed_range(index, expected):
    assert normalize_response(index, "likert_5") == expected


def test_likert_is_monotonically_increasing():
    values = [normalize_response(index, QuestionType.LIKERT_5) for index in range(5)]

    assert values == sorted(values)
    assert len(set(values)) == 5


@pytest.mark.parametrize("response", [-1, 5, 2.5, "3", True, None])
def test_likert_rejects_out_of_range_or_non_integer(response):
    with pytest.raises(ValidationError):
        normalize_response(response, "likert_5")


# ============================================================================
# EITHER / OR
# ============================================================================

def test_either_or_first_option_is_negative():
    assert normalize_response("A", "either_or") == -1.0


def test_either_or_second_option_is_positive():
    assert normalize_response("B", QuestionType.EITHER_OR) == 1.0


def test_either_or_rejects_other_tokens():
    with pytest.raises(ValidationError):
        normalize_response("C", "either_or")


# ============================================================================
# UNSUPPORTED TYPES
# ============================================================================

@pytest.mark.parametrize("question_type", ["likert_7", "short_text", "", None])
def test_unsupported_type_is_a_hard_failure(question_type):
    with pytest.raises(UnsupportedQuestionTypeError) as exc_info:
        normalize_response(2, question_type)

    assert exc_info.value.code == "UNSUPPORTED_QUESTION_TYPE"
