"""Domain exceptions."""

from typing import Any, Optional


class ProfileEngineException(Exception):
    """Base exception for the profile engine."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class QuestionNotFoundError(ProfileEngineException):
    """Question id is absent from the catalog."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(
            message=f"Question not found: {question_id}",
            code="QUESTION_NOT_FOUND"
        )


class UnsupportedQuestionTypeError(ProfileEngineException):
    """Question type the engine cannot normalize."""

    def __init__(self, question_type: Any):
        self.question_type = question_type
        super().__init__(
            message=f"Unsupported question type: {question_type}",
            code="UNSUPPORTED_QUESTION_TYPE"
        )


class CatalogError(ProfileEngineException):
    """Question catalog could not be loaded."""

    def __init__(self, source: str, details: Optional[str] = None):
        message = f"Invalid question catalog {source}"
        if details:
            message += f": {details}"

        super().__init__(
            message=message,
            code="CATALOG_ERROR"
        )


class ValidationError(ProfileEngineException):
    """Domain validation error."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        message = f"Invalid {field}: {value}"
        if reason:
            message += f" - {reason}"

        super().__init__(
            message=message,
            code="VALIDATION_ERROR"
        )
