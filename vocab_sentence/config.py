"""
Configuration for vocab-sentence.

The only external setting is the API key, read from the environment at
request time. Everything else is a fixed default.

Usage:
    >>> from vocab_sentence.config import get_config
    >>> config = get_config()
    >>> config.api.model
    'llama3-70b'
"""

import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_URL = "https://api.llama-api.com/chat/completions"
DEFAULT_MODEL = "llama3-70b"
API_KEY_ENV = "LLAMA_API_KEY"

ConfigValidationError = ConfigurationError

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# =============================================================================
# Configuration Sections
# =============================================================================


@dataclass
class ApiConfig:
    """Chat-completion endpoint configuration."""

    url: str = API_URL
    model: str = DEFAULT_MODEL
    api_key_env: str = API_KEY_ENV
    timeout: float | None = None  # None blocks until the server answers

    def __post_init__(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise ConfigValidationError(f"api.url must be an http(s) URL: {self.url}")
        if not self.model:
            raise ConfigValidationError("api.model must not be empty")
        if not self.api_key_env:
            raise ConfigValidationError("api.api_key_env must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigValidationError("api.timeout must be > 0")

    def get_api_key(self) -> str:
        """Read the API key from the environment.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        api_key = os.getenv(self.api_key_env, "")
        if not api_key:
            raise ConfigurationError(
                f"{self.api_key_env} environment variable is not set",
                {"env": self.api_key_env},
            )
        return api_key


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        if self.level not in _VALID_LOG_LEVELS:
            raise ConfigValidationError(f"logging.level must be one of {sorted(_VALID_LOG_LEVELS)}")


# =============================================================================
# Main Configuration
# =============================================================================


@dataclass
class Config:
    """Complete vocab-sentence configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "api": asdict(self.api),
            "logging": asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        try:
            return cls(
                api=ApiConfig(**data.get("api", {})),
                logging=LoggingConfig(**data.get("logging", {})),
            )
        except TypeError as e:
            raise ConfigValidationError(f"Invalid configuration: {e}") from e


def get_config(**overrides: Any) -> Config:
    """Build the configuration from defaults plus keyword section overrides.

    Example:
        >>> get_config(logging={"level": "debug"}).logging.level
        'DEBUG'
    """
    config = Config.from_dict(overrides)
    logger.debug(f"Using endpoint {config.api.url} with model {config.api.model}")
    return config


__all__ = [
    "API_KEY_ENV",
    "API_URL",
    "ApiConfig",
    "Config",
    "ConfigValidationError",
    "DEFAULT_MODEL",
    "LoggingConfig",
    "get_config",
]
