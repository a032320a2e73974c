"""Test the concurrent aggregator."""

import asyncio
import time

import pytest

from chatparse.classifiers import EmoticonClassifier, LinkClassifier, MentionClassifier
from chatparse.classifiers.base import BaseClassifier
from chatparse.common.errors import ParseTimeoutError
from chatparse.models import Category, ClassificationResult, Link, Result
from chatparse.parser import Aggregation, Aggregator, State


class _FailingClassifier(BaseClassifier):
    """Classifier that always raises."""

    category = Category.MENTION

    async def classify(self, word: str) -> ClassificationResult:
        raise RuntimeError("boom")


class _RecordingClassifier(BaseClassifier):
    """Classifier that tracks how many calls are in flight at once."""

    category = Category.EMOTICON

    def __init__(self) -> None:
        self.active = 0
        self.peak = 0

    async def classify(self, word: str) -> ClassificationResult:
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.05)
        self.active -= 1
        return self.report(word)


def _classifiers(resolver):
    return [MentionClassifier(), EmoticonClassifier(), LinkClassifier(resolver=resolver)]


class TestAggregation:
    """Test suite for the per-call state machine."""

    def test_empty_aggregation_is_complete(self):
        """Test zero expected reports completes immediately."""
        aggregation = Aggregation(total=0)
        assert aggregation.state is State.COMPLETE
        assert aggregation.result.is_empty()

    def test_reports_complete_aggregation(self):
        """Test the last outstanding report completes the aggregation."""
        aggregation = Aggregation(total=2)
        aggregation.report(ClassificationResult.hit(Category.MENTION, "kris"))
        assert aggregation.state is State.COLLECTING

        aggregation.report(ClassificationResult.miss(Category.LINK))
        assert aggregation.state is State.COMPLETE
        assert aggregation.result.mentions == ["kris"]

    def test_expire_discards_collected(self):
        """Test timing out replaces the result with an empty one."""
        aggregation = Aggregation(total=2)
        aggregation.report(ClassificationResult.hit(Category.MENTION, "kris"))

        result = aggregation.expire()
        assert aggregation.state is State.TIMED_OUT
        assert result.is_empty()

    def test_late_report_ignored(self):
        """Test reports after a terminal state are dropped."""
        aggregation = Aggregation(total=2)
        aggregation.expire()

        assert not aggregation.report(ClassificationResult.hit(Category.MENTION, "late"))
        assert aggregation.result.is_empty()
        assert aggregation.state is State.TIMED_OUT

    def test_expire_after_complete_keeps_result(self):
        """Test a completed aggregation cannot be timed out afterwards."""
        aggregation = Aggregation(total=1)
        aggregation.report(ClassificationResult.hit(Category.EMOTICON, "coffee"))

        assert aggregation.expire().emoticons == ["coffee"]
        assert aggregation.state is State.COMPLETE


class TestAggregator:
    """Test suite for the fan-out and deadline."""

    @pytest.mark.asyncio
    async def test_run_merges_all_categories(self, resolver, logger):
        """Test matches of every category are merged."""
        aggregator = Aggregator(_classifiers(resolver), timeout=1.0, logger=logger)
        result = await aggregator.run(["@kris", "(coffee)", "http://google.com", "plain"])

        assert result.mentions == ["kris"]
        assert result.emoticons == ["coffee"]
        assert result.links == [Link(url="http://google.com", title="Google")]

    @pytest.mark.asyncio
    async def test_run_without_words(self, resolver, logger):
        """Test no words completes with an empty result."""
        aggregator = Aggregator(_classifiers(resolver), timeout=1.0, logger=logger)
        result = await aggregator.run([])
        assert result == Result()

    @pytest.mark.asyncio
    async def test_run_timeout_discards_everything(self, slow_resolver, logger):
        """Test a slow classifier fails the whole parse with an empty result."""
        aggregator = Aggregator(_classifiers(slow_resolver), timeout=0.1, logger=logger)

        with pytest.raises(ParseTimeoutError) as exc_info:
            await aggregator.run(["@kris", "(coffee)", "http://slow.example"])

        assert exc_info.value.result.is_empty()
        assert exc_info.value.timeout == 0.1

    @pytest.mark.asyncio
    async def test_run_timeout_cancels_stragglers(self, slow_resolver, logger):
        """Test abandoned classifiers are cancelled instead of awaited."""
        aggregator = Aggregator(_classifiers(slow_resolver), timeout=0.1, logger=logger)

        start = time.monotonic()
        with pytest.raises(ParseTimeoutError):
            await aggregator.run(["http://slow.example"])
        assert time.monotonic() - start < 1.0

        # Let the cancellations settle
        await asyncio.sleep(0.01)
        others = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        assert all(t.done() for t in others)

    @pytest.mark.asyncio
    async def test_run_failing_classifier_is_a_miss(self, logger):
        """Test an unexpected classifier error counts as a report without a match."""
        aggregator = Aggregator(
            [_FailingClassifier(), EmoticonClassifier()], timeout=1.0, logger=logger
        )
        result = await aggregator.run(["(coffee)"])

        assert result.mentions == []
        assert result.emoticons == ["coffee"]

    @pytest.mark.asyncio
    async def test_run_classifies_words_concurrently(self, logger):
        """Test all words are in flight at the same time."""
        classifier = _RecordingClassifier()
        aggregator = Aggregator([classifier], timeout=1.0, logger=logger)

        result = await aggregator.run(["a", "b", "c", "d"])

        assert classifier.peak == 4
        assert sorted(result.emoticons) == ["a", "b", "c", "d"]

    @pytest.mark.asyncio
    async def test_run_caller_cancellation_cancels_classifiers(self, slow_resolver, logger):
        """Test cancelling the parse cancels its classifiers."""
        aggregator = Aggregator([LinkClassifier(resolver=slow_resolver)], timeout=5.0, logger=logger)
        task = asyncio.create_task(aggregator.run(["http://slow.example"]))
        await asyncio.sleep(0.05)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        await asyncio.sleep(0.01)
        others = [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]
        assert all(t.done() for t in others)
