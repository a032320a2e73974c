"""Title resolver package."""

from .client import TitleResolver, extract_title
from .config import ResolverConfig

__all__ = ["ResolverConfig", "TitleResolver", "extract_title"]
