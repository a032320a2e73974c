"""Pytest configuration."""

import asyncio
import logging
import sys

import path
import pytest

sys.path.append(str(path.Path(__file__).parent.parent))

from chatparse.parser import Parser, ParserConfig  # noqa: E402


class StubResolver:
    """Title resolver answering from a lookup table, optionally after a delay."""

    def __init__(self, titles: dict[str, str] | None = None, delay: float = 0.0) -> None:
        self.titles = titles or {}
        self.delay = delay
        self.calls: list[str] = []

    async def resolve(self, url: str) -> str:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.titles.get(url, "")


@pytest.fixture
def logger() -> logging.Logger:
    """Create a test logger."""
    return logging.getLogger("chatparse.tests")


@pytest.fixture
def resolver() -> StubResolver:
    """Create a resolver that knows a couple of pages."""
    return StubResolver(
        titles={
            "http://google.com": "Google",
            "https://twitter.com/jdorfman/status/430511497475670016": "Justin Dorfman on Twitter",
        }
    )


@pytest.fixture
def slow_resolver() -> StubResolver:
    """Create a resolver that never answers within a test deadline."""
    return StubResolver(delay=10.0)


@pytest.fixture
def parser(resolver, logger) -> Parser:
    """Create a parser backed by the stub resolver."""
    return Parser(ParserConfig(), resolver=resolver, logger=logger)
