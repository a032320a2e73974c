"""Extract mentions, emoticons and links from chat messages."""

from chatparse.common import ChatParseError, ParseTimeoutError, RootConfig, load_config
from chatparse.models import Category, ClassificationResult, Failure, Link, Result
from chatparse.parser import Parser, ParserConfig, parse
from chatparse.resolver import ResolverConfig, TitleResolver

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ChatParseError",
    "ClassificationResult",
    "Failure",
    "Link",
    "ParseTimeoutError",
    "Parser",
    "ParserConfig",
    "ResolverConfig",
    "Result",
    "RootConfig",
    "TitleResolver",
    "load_config",
    "parse",
]
