"""Exceptions raised by the parser."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chatparse.models.result import Result


class ChatParseError(Exception):
    """Base class for parser errors."""


class ParseTimeoutError(ChatParseError, TimeoutError):
    """Raised when classification does not finish before the deadline.

    Carries the empty result that replaces anything collected so far.
    """

    def __init__(self, timeout: float, result: Result) -> None:
        super().__init__(
            f"Major Timeout. Waiting more than {timeout:g} seconds for response while parsing"
        )
        self.timeout = timeout
        self.result = result


class ResolverError(ChatParseError):
    """Transport or extraction failure while resolving a page title."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Unable to resolve title for {url}: {reason}")
        self.url = url
        self.reason = reason
