"""Parser package."""

from .aggregator import Aggregation, Aggregator, State
from .client import Parser, parse
from .config import DEFAULT_TIMEOUT, ParserConfig
from .splitter import split_words

__all__ = [
    "DEFAULT_TIMEOUT",
    "Aggregation",
    "Aggregator",
    "Parser",
    "ParserConfig",
    "State",
    "parse",
    "split_words",
]
