from __future__ import annotations

from typing import Protocol

from typing_extensions import runtime_checkable

from chatparse.models.base import Category, ClassificationResult
from chatparse.models.result import Link

from .base import BaseClassifier

# Checked in order, so http:// wins when a word carries both
URL_SCHEMES = ("http://", "https://")


@runtime_checkable
class TitleLookup(Protocol):
    async def resolve(self, url: str) -> str: ...


def find_url(word: str) -> str:
    """Return the scheme and everything after its first occurrence in word."""
    for scheme in URL_SCHEMES:
        _, marker, rest = word.partition(scheme)
        if marker:
            return scheme + rest
    return ""


class LinkClassifier(BaseClassifier):
    """Finds a URL in a word and looks up the title of the page."""

    category = Category.LINK

    def __init__(self, resolver: TitleLookup | None = None) -> None:
        self.resolver = resolver

    async def classify(self, word: str) -> ClassificationResult:
        url = find_url(word)
        if not url:
            return ClassificationResult.miss(self.category)

        # An empty title is still a match
        title = await self.resolver.resolve(url) if self.resolver else ""
        return self.report(Link(url=url, title=title))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(resolver={self.resolver!r})"
