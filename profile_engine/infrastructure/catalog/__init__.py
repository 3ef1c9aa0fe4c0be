"""Question catalog infrastructure module."""

from .question_catalog import (
    DEFAULT_CATALOG_FILE,
    QuestionCatalog,
    QuestionRecord,
    load_default_catalog,
)

__all__ = [
    "DEFAULT_CATALOG_FILE",
    "QuestionCatalog",
    "QuestionRecord",
    "load_default_catalog",
]
