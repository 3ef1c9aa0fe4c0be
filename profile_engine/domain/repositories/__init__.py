"""Domain repository interfaces."""

from .question_repository import IQuestionCatalog

__all__ = [
    "IQuestionCatalog",
]
