"""Classification report types."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Category(str, Enum):
    """Token categories a word is classified into."""

    MENTION = "mention"
    EMOTICON = "emoticon"
    LINK = "link"


class ClassificationResult(BaseModel, Generic[T]):
    """Outcome of classifying one word for one category."""

    model_config = ConfigDict(frozen=True)

    category: Category = Field(
        ...,
        description="Category the word was classified for",
    )
    matched: bool = Field(
        default=False,
        description="Whether the word holds a token of this category",
    )
    value: T | None = Field(
        default=None,
        description="Extracted token, ignored when not matched",
    )

    @classmethod
    def hit(cls, category: Category, value: T) -> ClassificationResult[T]:
        return cls(category=category, matched=True, value=value)

    @classmethod
    def miss(cls, category: Category) -> ClassificationResult[T]:
        return cls(category=category)
