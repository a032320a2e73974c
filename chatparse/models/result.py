"""Parse result and wire format."""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field

from .base import Category, ClassificationResult


class Link(BaseModel):
    """A URL found in the text and the title of the page it points to."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        description="URL including its scheme",
    )
    title: str = Field(
        default="",
        description="Page title, empty when the lookup failed",
    )


class Result(BaseModel):
    """Tokens extracted from one line of text."""

    model_config = ConfigDict(validate_assignment=True)

    mentions: list[str] = Field(
        default_factory=list,
        description="Mentioned names without the leading @",
    )
    emoticons: list[str] = Field(
        default_factory=list,
        description="Emoticon names without parentheses",
    )
    links: list[Link] = Field(
        default_factory=list,
        description="Links with their page titles",
    )

    def merge(self, report: ClassificationResult) -> bool:
        """Append a matched report to its category, returning whether anything was added."""
        if not report.matched:
            return False

        if report.category is Category.MENTION:
            self.mentions.append(report.value)
        elif report.category is Category.EMOTICON:
            self.emoticons.append(report.value)
        elif report.category is Category.LINK:
            self.links.append(report.value)
        else:
            raise ValueError(f"Unknown category: {report.category}")
        return True

    def is_empty(self) -> bool:
        return not (self.mentions or self.emoticons or self.links)

    def same_as(self, other: Result) -> bool:
        """Compare two results ignoring arrival order."""
        return (
            Counter(self.mentions) == Counter(other.mentions)
            and Counter(self.emoticons) == Counter(other.emoticons)
            and Counter(self.links) == Counter(other.links)
        )

    def to_json(self, **kwargs) -> str:
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, data: str | bytes) -> Result:
        return cls.model_validate_json(data)


class Failure(BaseModel):
    """Body returned in place of a result when parsing fails."""

    failure: str = Field(
        ...,
        description="Human readable failure message",
    )

    @classmethod
    def missing_input(cls) -> Failure:
        return cls(failure="Missing input parameter")

    def to_json(self, **kwargs) -> str:
        return self.model_dump_json(**kwargs)
