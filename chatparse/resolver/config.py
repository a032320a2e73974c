"""Title resolver configuration."""

from __future__ import annotations

from pydantic import Field

from chatparse.common.config import BaseConfig


class ResolverConfig(BaseConfig):
    """Title resolver configuration."""

    follow_redirects: bool = Field(
        default=True,
        description="Follow HTTP redirects before reading the page",
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds, unbounded when unset",
        gt=0,
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent header sent with every request",
    )
