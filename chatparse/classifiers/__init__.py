"""Per-word classifiers and their registry."""

from __future__ import annotations

from collections.abc import Sequence

from chatparse.models.base import Category

from .base import BaseClassifier
from .emoticon import EmoticonClassifier, find_emoticon
from .link import LinkClassifier, TitleLookup, find_url
from .mention import MentionClassifier, find_mention

_REGISTRY: dict[Category, type[BaseClassifier]] = {
    Category.MENTION: MentionClassifier,
    Category.EMOTICON: EmoticonClassifier,
    Category.LINK: LinkClassifier,
}


class ClassifierFactory:
    @staticmethod
    def get_classifier(name: str | Category) -> type[BaseClassifier]:
        try:
            return _REGISTRY[Category(name)]
        except ValueError as e:
            raise ValueError(f"Unknown classifier: {name}") from e

    @staticmethod
    def build(
        categories: Sequence[str | Category],
        resolver: TitleLookup | None = None,
    ) -> list[BaseClassifier]:
        """Instantiate one classifier per category, wiring the resolver into links."""
        classifiers = []
        for name in categories:
            klass = ClassifierFactory.get_classifier(name)
            if klass is LinkClassifier:
                classifiers.append(klass(resolver=resolver))
            else:
                classifiers.append(klass())
        return classifiers


__all__ = [
    "BaseClassifier",
    "ClassifierFactory",
    "EmoticonClassifier",
    "LinkClassifier",
    "MentionClassifier",
    "TitleLookup",
    "find_emoticon",
    "find_mention",
    "find_url",
]
