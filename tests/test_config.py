"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from roli.utils import get_config, reload_config
from roli.utils.config import DEFAULT_USER_AGENT, Config, RoliConfig
from roli.utils.exceptions import ConfigurationError


def test_defaults():
    config = get_config().roli

    assert config.base_url == "https://www.rolimons.com"
    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.request_timeout == 30.0
    assert config.roli_verification is None
    assert config.log_level == "WARNING"


def test_get_config_is_a_singleton():
    assert get_config() is get_config()


def test_get_config_accepts_replacement():
    custom = Config()

    assert get_config(custom) is custom
    assert get_config() is custom


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROLI_BASE_URL", "http://localhost:8080///")
    monkeypatch.setenv("ROLI_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("ROLI_ROLI_VERIFICATION", "token")
    monkeypatch.setenv("ROLI_LOG_LEVEL", "debug")

    config = reload_config().roli

    assert config.base_url == "http://localhost:8080"
    assert config.request_timeout == 5.0
    assert config.roli_verification == "token"
    assert config.log_level == "DEBUG"


def test_reload_picks_up_changes(monkeypatch):
    assert get_config().roli.roli_verification is None

    monkeypatch.setenv("ROLI_ROLI_VERIFICATION", "token")

    assert get_config().roli.roli_verification is None
    assert reload_config().roli.roli_verification == "token"


def test_empty_verification_is_unset(monkeypatch):
    monkeypatch.setenv("ROLI_ROLI_VERIFICATION", "  ")

    assert reload_config().roli.roli_verification is None


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("ROLI_BASE_URL", "ftp://rolimons.com"),
        ("ROLI_REQUEST_TIMEOUT", "0"),
        ("ROLI_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_environment_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError) as exc_info:
        reload_config()

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_roli_config_validates_base_url_directly():
    with pytest.raises(ValidationError):
        RoliConfig(base_url="www.rolimons.com")
