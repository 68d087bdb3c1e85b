"""Unit tests for configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from weather_gateway.config import DEFAULT_OPENWEATHER_URL, Settings, get_settings


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    settings = Settings(api_key="test-key", _env_file=None)

    assert settings.addr == ":8080"
    assert settings.bind_host == "0.0.0.0"
    assert settings.bind_port == 8080
    assert settings.openweather_url == DEFAULT_OPENWEATHER_URL
    assert settings.upstream_connect_timeout == 5.0
    assert settings.upstream_read_timeout == 10.0
    assert settings.log_level == "INFO"


def test_settings_missing_api_key():
    """Test a missing API key is a validation error."""
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


@pytest.mark.parametrize("api_key", ["", "   "])
def test_settings_empty_api_key(api_key):
    """Test an empty or whitespace API key is rejected."""
    with pytest.raises(ValidationError):
        Settings(api_key=api_key, _env_file=None)


def test_settings_env_loading():
    """Test settings load from the original environment variable names."""
    with patch.dict(
        "os.environ",
        {
            "API_KEY": "env-key",
            "ADDR": "127.0.0.1:9000",
            "UPSTREAM_READ_TIMEOUT": "2.5",
            "LOG_LEVEL": "debug",
        },
        clear=True,
    ):
        settings = Settings(_env_file=None)

        assert settings.api_key == "env-key"
        assert settings.bind_host == "127.0.0.1"
        assert settings.bind_port == 9000
        assert settings.upstream_read_timeout == 2.5
        assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "addr,host,port",
    [
        (":8080", "0.0.0.0", 8080),
        ("localhost:3000", "localhost", 3000),
        ("[::1]:8081", "::1", 8081),
    ],
)
def test_settings_addr_parsing(addr, host, port):
    """Test host/port derived from addr."""
    settings = Settings(api_key="key", addr=addr, _env_file=None)

    assert settings.bind_host == host
    assert settings.bind_port == port


@pytest.mark.parametrize("addr", ["8080", ":http", ":0", ":70000"])
def test_settings_addr_invalid(addr):
    """Test malformed bind addresses are rejected."""
    with pytest.raises(ValidationError):
        Settings(api_key="key", addr=addr, _env_file=None)


def test_settings_invalid_url():
    """Test provider URL must be http(s)."""
    with pytest.raises(ValidationError):
        Settings(api_key="key", openweather_url="ftp://example.com", _env_file=None)


def test_settings_non_positive_timeout():
    """Test timeouts must be positive."""
    with pytest.raises(ValidationError):
        Settings(api_key="key", upstream_connect_timeout=0, _env_file=None)


def test_get_settings_singleton():
    """Test get_settings returns singleton instance."""
    with patch.dict("os.environ", {"API_KEY": "singleton-key"}):
        with patch("weather_gateway.config._settings_instance", None):
            settings1 = get_settings()
            settings2 = get_settings()

            assert settings1 is settings2
