"""Utility functions and classes for roli."""

from .config import Config, RoliConfig, get_config, reload_config, reset_config
from .exceptions import (
    ConfigurationError,
    CooldownNotExpiredError,
    HTTPStatusError,
    InternalServerError,
    InvalidItemIdError,
    MalformedResponseError,
    NetworkError,
    RateLimitExceededError,
    RequestUnsuccessfulError,
    RoliError,
    RoliVerificationContainsInvalidCharactersError,
    RoliVerificationError,
    RoliVerificationInvalidOrExpiredError,
    RoliVerificationNotSetError,
    TooManyRequestsError,
    UnidentifiedStatusCodeError,
)
from .logging_setup import setup_logging

__all__ = [
    "Config",
    "ConfigurationError",
    "CooldownNotExpiredError",
    "HTTPStatusError",
    "InternalServerError",
    "InvalidItemIdError",
    "MalformedResponseError",
    "NetworkError",
    "RateLimitExceededError",
    "RequestUnsuccessfulError",
    "RoliConfig",
    "RoliError",
    "RoliVerificationContainsInvalidCharactersError",
    "RoliVerificationError",
    "RoliVerificationInvalidOrExpiredError",
    "RoliVerificationNotSetError",
    "TooManyRequestsError",
    "UnidentifiedStatusCodeError",
    "get_config",
    "reload_config",
    "reset_config",
    "setup_logging",
]
