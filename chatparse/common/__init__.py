from .component import ComponentFactory
from .config import BaseConfig, LoggingConfig, RootConfig, ServerConfig, load_config
from .errors import ChatParseError, ParseTimeoutError, ResolverError

__all__ = [
    "BaseConfig",
    "ChatParseError",
    "ComponentFactory",
    "LoggingConfig",
    "ParseTimeoutError",
    "ResolverError",
    "RootConfig",
    "ServerConfig",
    "load_config",
]
