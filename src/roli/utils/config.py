"""Centralized configuration management for roli.

Values come from environment variables (``ROLI_`` prefix) or a ``.env``
file, falling back to hardcoded defaults.

Usage:
    from roli.utils import get_config

    config = get_config()
    print(config.roli.base_url)
"""

from __future__ import annotations

import threading
from logging import getLogger
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:101.0) Gecko/20100101 Firefox/101.0"
)


class RoliConfig(BaseSettings):
    """Rolimons API configuration."""

    base_url: str = Field(
        default="https://www.rolimons.com",
        description="Base URL all endpoint paths are appended to",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="HTTP User-Agent header sent with every request",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds for clients roli creates itself",
        gt=0,
    )
    roli_verification: str | None = Field(
        default=None,
        description="_RoliVerification cookie value for authenticated endpoints",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level used by setup_logging when none is given",
    )

    model_config = SettingsConfigDict(
        env_prefix="ROLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got: {v}")
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("roli_verification", mode="before")
    @classmethod
    def empty_verification_is_unset(cls, v: object) -> object:
        """Treat an empty ROLI_ROLI_VERIFICATION as not set."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Config:
    """Main configuration container."""

    def __init__(self) -> None:
        """Initialize configuration from environment and defaults.

        Raises:
            ConfigurationError: If an environment value is invalid.
        """
        try:
            self.roli = RoliConfig()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid roli configuration: {e}") from e

    def reload(self) -> None:
        """Reload configuration from environment variables."""
        self.__init__()

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(\n  roli={self.roli}\n)"


# Global configuration instance (singleton)
_config_instance: Config | None = None
_config_lock = threading.Lock()


def get_config(config: Config | None = None) -> Config:
    """Get the global configuration instance (lazy initialization).

    Args:
        config: Optional config instance to use instead of singleton.
                If provided, it replaces the singleton.

    Returns:
        Global Config instance
    """
    global _config_instance  # noqa: PLW0603

    if config is not None:
        with _config_lock:
            _config_instance = config
        return _config_instance

    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = Config()
                logger.debug("Loaded configuration: %r", _config_instance)

    assert _config_instance is not None
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment.

    Returns:
        Reloaded Config instance
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = Config()
    return _config_instance


def reset_config() -> None:
    """Reset the global config instance.

    Primarily for testing.
    """
    global _config_instance  # noqa: PLW0603
    with _config_lock:
        _config_instance = None
