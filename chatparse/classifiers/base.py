from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from chatparse.models.base import Category, ClassificationResult


class BaseClassifier(ABC):
    """Inspects a single word for one category of token."""

    category: ClassVar[Category]

    @abstractmethod
    async def classify(self, word: str) -> ClassificationResult:
        pass

    def report(self, value) -> ClassificationResult:
        """Build the report for a scanned value, empty values being a miss."""
        if not value:
            return ClassificationResult.miss(self.category)
        return ClassificationResult.hit(self.category, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
