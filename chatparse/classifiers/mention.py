from __future__ import annotations

from chatparse.models.base import Category, ClassificationResult

from .base import BaseClassifier

MENTION_MARKER = "@"
MENTION_BREAK_CHARS = frozenset(",;-.!?/@<>[]{}_=+#$%^&*()'\"\\")


def find_mention(word: str) -> str:
    """Return the name following the first usable @ in word, or an empty string.

    An @ in the last position never starts a mention. Any other @ (re)starts
    the capture without being captured itself; the first break character ends
    the scan for good.
    """
    found = False
    last = len(word) - 1
    value = []
    for i, char in enumerate(word):
        if char == MENTION_MARKER and i != last:
            found = True
            continue
        if found:
            if char in MENTION_BREAK_CHARS:
                break
            value.append(char)
    return "".join(value)


class MentionClassifier(BaseClassifier):
    category = Category.MENTION

    async def classify(self, word: str) -> ClassificationResult:
        return self.report(find_mention(word))
