from __future__ import annotations

import logging
from typing import Any, Generic

from chatparse.common.config import TConf


class ComponentFactory(Generic[TConf]):
    """Base class for configurable components."""

    # This is a class variable that will be set by subclasses
    _config_type: type[TConf]
    _instance_config: TConf

    def __init__(self, config: TConf, logger: logging.Logger | None = None) -> None:
        """Initialize with configuration and an injected logger."""
        self._instance_config = config
        self.logger = logger or logging.getLogger(type(self).__module__)

    @classmethod
    def from_config(cls, config: TConf | dict[str, Any] | None = None, **kwargs: Any):
        """Create a component from a configuration model or dictionary."""
        if config is None:
            config = {}
        if not isinstance(config, cls._config_type):
            config = cls._config_type(**config)
        return cls(config, **kwargs)

    @property
    def config(self) -> TConf:
        """Access the configuration."""
        return self._instance_config
