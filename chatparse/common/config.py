"""Common configuration classes."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, TypeVar

import yaml
from path import Path
from pydantic import BaseModel, ConfigDict, Field

ENV_CONFIG_PATH = "CHATPARSE_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        from_attributes=True,
    )


class LoggingConfig(BaseConfig):
    """Logging configuration."""

    name: str = Field(
        default="chatparse",
        description="Application logger name",
    )
    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )
    filename: str | None = Field(
        default=None,
        description="Optional log file, rotated by size",
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Rotate the log file after this many bytes",
        ge=1,
    )
    backup_count: int = Field(
        default=5,
        description="Number of rotated log files to keep",
        ge=0,
    )

    def configure(self) -> logging.Logger:
        """Configure the root logger once and return the application logger."""
        logging.basicConfig(level=self.level, format=self.format)

        # Add file handler if filename specified
        if self.filename:
            handler = RotatingFileHandler(
                filename=self.filename,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
            )
            handler.setFormatter(logging.Formatter(self.format))
            logging.getLogger().addHandler(handler)

        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)
        return logger


class ServerConfig(BaseConfig):
    """HTTP server configuration."""

    host: str = Field(
        default="0.0.0.0",
        description="Interface to bind",
    )
    port: int = Field(
        default=1313,
        description="Port to listen on",
        ge=1,
        le=65535,
    )


class RootConfig(BaseConfig):
    """Root configuration."""

    parser: dict[str, Any] = Field(
        default_factory=dict,
        description="Parser configuration",
    )
    resolver: dict[str, Any] = Field(
        default_factory=dict,
        description="Title resolver configuration",
    )
    server: ServerConfig = Field(
        default_factory=ServerConfig,
        description="HTTP server configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )


def load_config(config_path: str | None = None) -> RootConfig:
    """Load configuration from an explicit path, the environment or the bundled default."""

    explicit = config_path or os.environ.get(ENV_CONFIG_PATH)
    path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return RootConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return RootConfig.model_validate(raw)


TConf = TypeVar("TConf", bound=BaseConfig)
