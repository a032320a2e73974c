"""Parser configuration."""

from __future__ import annotations

from pydantic import Field, field_validator

from chatparse.common.config import BaseConfig
from chatparse.models.base import Category

DEFAULT_TIMEOUT = 3.0


class ParserConfig(BaseConfig):
    """Parser configuration."""

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Seconds to wait for every classifier before discarding the parse",
        gt=0,
    )
    categories: list[Category] = Field(
        default_factory=lambda: list(Category),
        description="Categories every word is classified for",
        min_length=1,
    )

    @field_validator("categories", mode="before")
    @classmethod
    def validate_categories(cls, v: list[str]) -> list[Category]:
        if isinstance(v, str):
            v = [v]
        try:
            categories = [Category(name.lower()) for name in v]
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid categories: {v}") from e

        if len(set(categories)) != len(categories):
            raise ValueError(f"Duplicate categories: {v}")
        return categories
