"""Page title lookup for links found in chat text."""

from __future__ import annotations

import logging

import httpx

from chatparse.common.component import ComponentFactory
from chatparse.common.errors import ResolverError

from .config import ResolverConfig

TITLE_OPEN = "<title>"
TITLE_CLOSE = "</title>"


def extract_title(body: str) -> str:
    """Return the text between the first <title> and the next </title>."""
    start = body.find(TITLE_OPEN)
    if start == -1:
        raise ValueError(f"Unable to find {TITLE_OPEN} tag in page content")
    start += len(TITLE_OPEN)

    end = body.find(TITLE_CLOSE, start)
    if end == -1:
        raise ValueError(f"Unable to find {TITLE_CLOSE} tag in page content")
    return body[start:end]


class TitleResolver(ComponentFactory[ResolverConfig]):
    """Fetches a page and extracts its title."""

    _config_type = ResolverConfig

    def __init__(
        self,
        config: ResolverConfig,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize resolver."""
        super().__init__(config, logger)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy load client."""

        if self._client is None:
            headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
            self._client = httpx.AsyncClient(
                follow_redirects=self.config.follow_redirects,
                timeout=self.config.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def fetch_title(self, url: str) -> str:
        """Fetch the page at url and extract its title, raising ResolverError on failure."""
        try:
            response = await self.client.get(url)
        except Exception as e:
            # httpx lets some URL errors through unwrapped (idna raises UnicodeError)
            raise ResolverError(url, f"GET failed: {e}") from e

        try:
            return extract_title(response.text)
        except ValueError as e:
            raise ResolverError(url, str(e)) from e

    async def resolve(self, url: str) -> str:
        """Resolve the title of url, empty when it cannot be determined."""
        try:
            title = await self.fetch_title(url)
        except ResolverError as e:
            self.logger.warning(str(e))
            return ""

        self.logger.debug(f"Resolved title for {url}: {title!r}")
        return title

    async def close(self):
        """Close client."""

        if self._client:
            try:
                await self._client.aclose()
            finally:
                self._client = None

    async def __aenter__(self) -> TitleResolver:
        """Async context manager entry."""

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, cleanup resources."""

        await self.close()
