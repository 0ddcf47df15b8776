"""
Unit tests for application settings.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from storefront.config.settings import Settings, get_settings

pytestmark = pytest.mark.unit


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "DEBUG",
        "ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOGIN_MAX_ATTEMPTS",
        "LOGIN_LOCKOUT_MINUTES",
        "BCRYPT_ROUNDS",
        "STORE_PLACEHOLDER",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.LOGIN_MAX_ATTEMPTS == 5
    assert settings.login_lockout_duration == timedelta(hours=2)
    assert settings.BCRYPT_ROUNDS == 12
    assert settings.STORE_PLACEHOLDER == "TBD"
    assert settings.LOG_FORMAT == "colored"
    assert settings.is_development is False


def test_reads_environment(clean_env):
    clean_env.setenv("LOGIN_MAX_ATTEMPTS", "3")
    clean_env.setenv("LOGIN_LOCKOUT_MINUTES", "15")
    clean_env.setenv("ENVIRONMENT", "test")

    settings = Settings(_env_file=None)

    assert settings.LOGIN_MAX_ATTEMPTS == 3
    assert settings.login_lockout_duration == timedelta(minutes=15)
    assert settings.is_development is True


def test_log_level_is_normalized(clean_env):
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"LOG_LEVEL": "LOUD"},
        {"LOG_FORMAT": "xml"},
        {"LOGIN_MAX_ATTEMPTS": 0},
        {"LOGIN_LOCKOUT_MINUTES": 0},
        {"BCRYPT_ROUNDS": 3},
        {"BCRYPT_ROUNDS": 32},
    ],
)
def test_invalid_values_rejected(clean_env, overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
