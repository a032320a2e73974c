from __future__ import annotations

from chatparse.models.base import Category, ClassificationResult

from .base import BaseClassifier

EMOTICON_OPEN = "("
EMOTICON_CLOSE = ")"
EMOTICON_BREAK_CHARS = frozenset(",;-.!?/@<>[]{}_=+#$%^&*'\"\\")

# Scanning reaches this index of the word only when the emoticon is too long
MAX_EMOTICON_SCAN = 14


def find_emoticon(word: str) -> str:
    """Return the emoticon name found in word, or an empty string.

    A break character suspends the capture without clearing it; a later
    opening parenthesis resumes it. Reaching MAX_EMOTICON_SCAN characters
    without a closing parenthesis discards the whole capture.
    """
    found = False
    value = []
    for i, char in enumerate(word):
        if i == MAX_EMOTICON_SCAN:
            return ""
        if char == EMOTICON_OPEN:
            found = True
            continue
        if found:
            if char == EMOTICON_CLOSE:
                break
            if char in EMOTICON_BREAK_CHARS:
                found = False
            else:
                value.append(char)
    return "".join(value) if found else ""


class EmoticonClassifier(BaseClassifier):
    category = Category.EMOTICON

    async def classify(self, word: str) -> ClassificationResult:
        return self.report(find_emoticon(word))
