"""Tests for config.py."""

import pytest

from simple_mcp_server.config import Settings
from simple_mcp_server.exceptions import ConfigurationError


def test_settings_from_env_reads_given_mapping():
    """Test that from_env reads SAMPLE_ENV and LOG_LEVEL from the mapping."""
    settings = Settings.from_env({"SAMPLE_ENV": "hello", "LOG_LEVEL": "DEBUG"})

    assert settings.sample_env == "hello"
    assert settings.log_level == "DEBUG"


def test_settings_from_env_defaults_to_os_environ(monkeypatch):
    """Test that from_env falls back to the process environment."""
    monkeypatch.setenv("SAMPLE_ENV", "from-process")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings.from_env()

    assert settings.sample_env == "from-process"
    assert settings.log_level == "INFO"


def test_require_sample_env_returns_value():
    assert Settings(sample_env="hello").require_sample_env() == "hello"


@pytest.mark.parametrize("sample_env", [None, ""])
def test_require_sample_env_raises_when_missing(sample_env):
    """Test that an absent or empty SAMPLE_ENV raises ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc_info:
        Settings(sample_env=sample_env).require_sample_env()

    assert "environment variable SAMPLE_ENV not set" in str(exc_info.value)


def test_configuration_error_is_value_error():
    """Test that ConfigurationError can be caught as ValueError."""
    with pytest.raises(ValueError):
        Settings().require_sample_env()
