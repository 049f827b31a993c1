"""Unit tests for configuration loading."""

import pytest

from envoi_resolver import constants
from envoi_resolver.config import (
    AlgodConfig,
    ResolverSettings,
    get_algod_config,
    get_env_var,
    get_resolver_settings,
    int_validator,
    url_validator,
)
from envoi_resolver.utils.errors import ConfigurationError

ENV_KEYS = (
    "ENVOI_ALGOD_URL", "ENVOI_ALGOD_TOKEN", "ENVOI_ALGOD_PORT", "ENVOI_API_URL",
    "ENVOI_HTTP_TIMEOUT", "ENVOI_RESOLVER_APP_ID", "ENVOI_TOKEN_APP_ID",
    "ENVOI_QUERY_ADDRESS", "ENVOI_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from a clean environment and empty getter caches."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_algod_config.cache_clear()
    get_resolver_settings.cache_clear()
    yield
    get_algod_config.cache_clear()
    get_resolver_settings.cache_clear()


def test_get_env_var_default():
    assert get_env_var("ENVOI_API_URL", "fallback") == "fallback"


def test_get_env_var_required():
    with pytest.raises(ConfigurationError):
        get_env_var("ENVOI_API_URL", required=True)


def test_get_env_var_validation_error(monkeypatch):
    monkeypatch.setenv("ENVOI_ALGOD_PORT", "not-a-port")
    with pytest.raises(ConfigurationError) as exc_info:
        get_env_var("ENVOI_ALGOD_PORT", validator=int_validator)
    assert exc_info.value.details["setting"] == "ENVOI_ALGOD_PORT"


def test_url_validator():
    assert url_validator("https://api.envoi.sh/") == "https://api.envoi.sh"
    assert url_validator("http://localhost:4001") == "http://localhost:4001"
    with pytest.raises(ValueError):
        url_validator("ftp://nope")


def test_algod_config_defaults():
    config = get_algod_config()
    assert config.url == constants.MAINNET_ALGOD_URL
    assert config.port == constants.MAINNET_ALGOD_PORT
    assert config.token == ""


def test_algod_config_from_env(monkeypatch):
    monkeypatch.setenv("ENVOI_ALGOD_URL", "http://localhost")
    monkeypatch.setenv("ENVOI_ALGOD_PORT", "4001")
    monkeypatch.setenv("ENVOI_ALGOD_TOKEN", "a" * 64)

    config = get_algod_config()

    assert config.address == "http://localhost:4001"
    assert config.token == "a" * 64


def test_algod_address_without_port():
    assert AlgodConfig(url="https://node.example/").address == "https://node.example"


def test_resolver_settings_defaults():
    settings = get_resolver_settings()
    assert settings.api_base_url == constants.API_BASE_URL
    assert settings.http_timeout == 5.0
    assert settings.resolver_app_id == constants.RESOLVER_APP_ID
    assert settings.token_app_id == constants.VNS_TOKEN_APP_ID


def test_resolver_settings_from_env(monkeypatch):
    monkeypatch.setenv("ENVOI_API_URL", "http://localhost:8080/")
    monkeypatch.setenv("ENVOI_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("ENVOI_RESOLVER_APP_ID", "11")
    monkeypatch.setenv("ENVOI_TOKEN_APP_ID", "12")
    monkeypatch.setenv("ENVOI_LOG_LEVEL", "debug")

    settings = get_resolver_settings()

    assert settings.api_base_url == "http://localhost:8080"
    assert settings.http_timeout == 2.5
    assert settings.resolver_app_id == 11
    assert settings.token_app_id == 12
    assert settings.log_level == "DEBUG"


def test_invalid_query_address_from_env(monkeypatch):
    monkeypatch.setenv("ENVOI_QUERY_ADDRESS", "nope")
    with pytest.raises(ConfigurationError):
        get_resolver_settings()


@pytest.mark.parametrize("kwargs", [
    {"http_timeout": 0},
    {"resolver_app_id": 0},
    {"token_app_id": -1},
    {"query_address": "short"},
])
def test_resolver_settings_validation(kwargs):
    with pytest.raises(ConfigurationError):
        ResolverSettings(**kwargs)
