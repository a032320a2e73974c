"""Concurrent fan-out of words to classifiers with an all-or-nothing deadline."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from enum import Enum

from chatparse.classifiers.base import BaseClassifier
from chatparse.common.errors import ParseTimeoutError
from chatparse.models.base import ClassificationResult
from chatparse.models.result import Result


class State(str, Enum):
    """Aggregation states."""

    COLLECTING = "COLLECTING"
    COMPLETE = "COMPLETE"
    TIMED_OUT = "TIMED_OUT"


class Aggregation:
    """Collects the reports of a single parse call.

    Reports are only merged while collecting. Once the aggregation reached a
    terminal state, its result is final and late reports are dropped.
    """

    def __init__(self, total: int) -> None:
        self.total = total
        self.outstanding = total
        self.result = Result()
        self.state = State.COLLECTING if total else State.COMPLETE

    @property
    def finished(self) -> bool:
        return self.state is not State.COLLECTING

    def report(self, outcome: ClassificationResult) -> bool:
        """Merge one classifier report, returning False when it came too late."""
        if self.finished:
            return False

        self.result.merge(outcome)
        self.outstanding -= 1
        if self.outstanding == 0:
            self.state = State.COMPLETE
        return True

    def expire(self) -> Result:
        """Time out, replacing everything collected with an empty result."""
        if self.state is State.COLLECTING:
            self.state = State.TIMED_OUT
            self.result = Result()
        return self.result


class Aggregator:
    """Runs every classifier on every word concurrently and merges the reports."""

    def __init__(
        self,
        classifiers: Sequence[BaseClassifier],
        timeout: float,
        logger: logging.Logger | None = None,
    ) -> None:
        self.classifiers = list(classifiers)
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    async def _classify(self, classifier: BaseClassifier, word: str) -> ClassificationResult:
        """Run one classifier, turning an unexpected failure into a miss."""
        try:
            return await classifier.classify(word)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.error(f"{classifier!r} failed on word {word!r}: {e}", exc_info=True)
            return ClassificationResult.miss(classifier.category)

    async def run(self, words: Sequence[str]) -> Result:
        """Classify words, returning the merged result or raising ParseTimeoutError."""
        aggregation = Aggregation(total=len(words) * len(self.classifiers))
        self.logger.debug(f"Parsing {len(words)} words, expecting {aggregation.total} reports")
        if aggregation.finished:
            return aggregation.result

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.timeout
        self.logger.debug(f"Setting timeout: {self.timeout:g} seconds")

        # One task per (word, category) pair
        pending = {
            asyncio.create_task(self._classify(classifier, word))
            for word in words
            for classifier in self.classifiers
        }

        try:
            while pending and not aggregation.finished:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    break
                done, pending = await asyncio.wait(
                    pending, timeout=remaining, return_when=asyncio.FIRST_COMPLETED
                )
                for task in done:
                    aggregation.report(task.result())
        finally:
            # Stragglers are abandoned, never awaited
            for task in pending:
                task.cancel()

        if aggregation.state is State.COMPLETE:
            self.logger.debug(f"Collected {aggregation.total} reports")
            return aggregation.result

        result = aggregation.expire()
        error = ParseTimeoutError(self.timeout, result)
        self.logger.error(f"{error} ({aggregation.outstanding}/{aggregation.total} outstanding)")
        raise error
