"""Parser component tying the splitter, classifiers and aggregator together."""

from __future__ import annotations

import logging

from chatparse.classifiers import ClassifierFactory, TitleLookup
from chatparse.common.component import ComponentFactory
from chatparse.common.config import RootConfig
from chatparse.models.result import Result
from chatparse.resolver import ResolverConfig, TitleResolver

from .aggregator import Aggregator
from .config import ParserConfig
from .splitter import split_words


class Parser(ComponentFactory[ParserConfig]):
    """Extracts mentions, emoticons and links from a line of chat text.

    Every word is classified for every configured category concurrently. If
    the classifiers do not all report within the configured timeout, the
    parse fails with ParseTimeoutError and nothing collected is kept.
    """

    _config_type = ParserConfig

    def __init__(
        self,
        config: ParserConfig,
        resolver: TitleLookup | None = None,
        logger: logging.Logger | None = None,
        resolver_config: ResolverConfig | dict | None = None,
    ) -> None:
        """Initialize parser.

        Without a resolver, one is built from resolver_config and closed with
        the parser; a resolver passed in stays the caller's to close.
        """
        super().__init__(config, logger)

        self._owns_resolver = resolver is None
        self.resolver = resolver or TitleResolver.from_config(resolver_config, logger=self.logger)
        self.aggregator = Aggregator(
            classifiers=ClassifierFactory.build(self.config.categories, resolver=self.resolver),
            timeout=self.config.timeout,
            logger=self.logger,
        )

        self.logger.debug(f"Parser initialized with config: {config}")

    async def parse(self, text: str) -> Result:
        """Parse a single line of text."""
        return await self.aggregator.run(split_words(text))

    async def close(self):
        """Release the HTTP client of a resolver this parser built."""

        if self._owns_resolver:
            await self.resolver.close()

    @classmethod
    def from_root_config(cls, config: RootConfig, logger: logging.Logger | None = None) -> Parser:
        """Create a parser and its title resolver from the root configuration."""
        return cls.from_config(config.parser, logger=logger, resolver_config=config.resolver)

    async def __aenter__(self) -> Parser:
        """Async context manager entry."""

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, cleanup resources."""

        await self.close()


async def parse(
    text: str,
    config: ParserConfig | dict | None = None,
    resolver: TitleLookup | None = None,
    logger: logging.Logger | None = None,
) -> Result:
    """Parse text with a short-lived parser."""
    async with Parser.from_config(config, resolver=resolver, logger=logger) as parser:
        return await parser.parse(text)
