from __future__ import annotations

WORD_SEPARATOR = " "


def split_words(text: str) -> list[str]:
    """Split text on single spaces, dropping the empty words runs of spaces leave behind.

    Other whitespace (tabs, newlines) stays inside the words.
    """
    return [word for word in text.split(WORD_SEPARATOR) if word]
