"""Question catalog interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Question


class IQuestionCatalog(ABC):
    """Read-only question catalog interface."""

    @abstractmethod
    def get(self, question_id: str) -> Optional[Question]:
        """Get question by ID."""
        pass

    @abstractmethod
    def all(self) -> List[Question]:
        """Get all questions in catalog order."""
        pass

    def __contains__(self, question_id: str) -> bool:
        return self.get(question_id) is not None
