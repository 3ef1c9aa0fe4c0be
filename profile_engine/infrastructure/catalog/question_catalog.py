"""JSON-backed question catalog."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ...domain.entities import Question, TraitMapping
from ...domain.exceptions import CatalogError
from ...domain.repositories import IQuestionCatalog
from ...domain.value_objects import QuestionType

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"
DEFAULT_CATALOG_FILE = DATA_DIR / "blueprint_question_bank.json"


class TraitMappingRecord(BaseModel):
    trait_id: str
    weight: float


class QuestionRecord(BaseModel):
    question_id: str
    layer: int
    type: str
    prompt: str
    maps_to: List[TraitMappingRecord] = []

    def to_question(self) -> Question:
        return Question(
            question_id=self.question_id,
            layer=self.layer,
            type=QuestionType.parse(self.type),
            prompt=self.prompt,
            maps_to=tuple(
                TraitMapping(trait_id=mapping.trait_id, weight=mapping.weight)
                for mapping in self.maps_to
            ),
        )


class QuestionCatalog(IQuestionCatalog):
    """Immutable question lookup, built once at start-up."""

    def __init__(self, questions: Iterable[Question], source: str = "<memory>"):
        self.source = source
        self._questions: Dict[str, Question] = {}

        for question in questions:
            if question.question_id in self._questions:
                raise CatalogError(source, f"duplicate question_id {question.question_id}")
            self._questions[question.question_id] = question

    def get(self, question_id: str) -> Optional[Question]:
        return self._questions.get(question_id)

    def all(self) -> List[Question]:
        return list(self._questions.values())

    def __len__(self) -> int:
        return len(self._questions)

    @classmethod
    def from_records(cls, records: Any, source: str = "<memory>") -> "QuestionCatalog":
        """Build a catalog from parsed JSON.

        Accepts a bare list of question records or an object with a
        ``questions`` list. Unknown question types raise
        UnsupportedQuestionTypeError.
        """
        if isinstance(records, dict):
            records = records.get("questions")

        if not isinstance(records, list):
            raise CatalogError(source, "expected a list of question records")

        questions = []
        for position, record in enumerate(records):
            try:
                parsed = QuestionRecord.model_validate(record)
            except PydanticValidationError as e:
                raise CatalogError(source, f"record {position}: {e}") from e
            questions.append(parsed.to_question())

        return cls(questions, source=source)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "QuestionCatalog":
        """Load catalog from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CatalogError(str(path), f"cannot read file: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(str(path), f"invalid JSON: {e}") from e

        catalog = cls.from_records(data, source=str(path))
        logger.info("Loaded question catalog %s with %d questions", path, len(catalog))
        return catalog


def load_default_catalog() -> QuestionCatalog:
    """Load the catalog packaged with the engine."""
    return QuestionCatalog.load(DEFAULT_CATALOG_FILE)
