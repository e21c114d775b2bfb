"""
Test suite for the configuration system.

Tests environment parsing, validation and the global configuration accessor.
"""

import pytest

from pricefeed_router.config import BaseConfig, ConfigError, ConfigManager, RouterConfig, get_config, reload_config
from pricefeed_router.config import manager as config_manager
from pricefeed_router.config.router import DEFAULT_ROUTER_ADDRESS


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep the process-wide config singleton from leaking between tests."""
    monkeypatch.setattr(config_manager, "_config_manager", None)


class TestEnvHelpers:
    """Static environment variable helpers."""

    def test_get_env_required_missing(self, monkeypatch):
        monkeypatch.delenv("PFR_TEST_VALUE", raising=False)
        with pytest.raises(ConfigError, match="PFR_TEST_VALUE"):
            BaseConfig.get_env("PFR_TEST_VALUE", required=True)

    def test_get_env_int(self, monkeypatch):
        monkeypatch.setenv("PFR_TEST_VALUE", "42")
        assert BaseConfig.get_env_int("PFR_TEST_VALUE", 1) == 42

    def test_get_env_int_invalid(self, monkeypatch):
        monkeypatch.setenv("PFR_TEST_VALUE", "forty-two")
        with pytest.raises(ConfigError, match="must be an integer"):
            BaseConfig.get_env_int("PFR_TEST_VALUE", 1)

    def test_get_env_list_keeps_order(self, monkeypatch):
        monkeypatch.setenv("PFR_TEST_VALUE", " USD, ETH ,,BTC ")
        assert BaseConfig.get_env_list("PFR_TEST_VALUE") == ["USD", "ETH", "BTC"]

    def test_get_env_list_default(self, monkeypatch):
        monkeypatch.delenv("PFR_TEST_VALUE", raising=False)
        assert BaseConfig.get_env_list("PFR_TEST_VALUE", ["USD"]) == ["USD"]


class TestRouterConfig:
    """Router configuration defaults and validation."""

    def test_defaults(self, monkeypatch):
        for key in ("INTERMEDIARY_ASSETS", "PRICE_ROUTER_ADDRESS", "ORACLE_NAME", "ORACLE_SYMBOL"):
            monkeypatch.delenv(key, raising=False)

        config = RouterConfig(ENVIRONMENT="local")

        assert config.INTERMEDIARY_ASSETS == ("USD",)
        assert config.PRICE_ROUTER_ADDRESS == DEFAULT_ROUTER_ADDRESS
        assert config.ORACLE_NAME == "Witnet"
        assert config.ORACLE_SYMBOL == "WIT"

    def test_intermediaries_from_env(self, monkeypatch):
        monkeypatch.setenv("INTERMEDIARY_ASSETS", "USD,ETH,BTC")
        config = RouterConfig(ENVIRONMENT="local")

        assert config.INTERMEDIARY_ASSETS == ("USD", "ETH", "BTC")

    def test_list_argument_becomes_tuple(self):
        config = RouterConfig(ENVIRONMENT="local", INTERMEDIARY_ASSETS=["USD", "EUR"])
        assert config.INTERMEDIARY_ASSETS == ("USD", "EUR")

    @pytest.mark.parametrize("kwargs,message", [
        (dict(INTERMEDIARY_ASSETS=()), "at least one"),
        (dict(INTERMEDIARY_ASSETS=("USD", "USD")), "Duplicate"),
        (dict(PRICE_ROUTER_ADDRESS="0x1234"), "router address"),
        (dict(RPC_URL="ws://localhost:8546"), "http"),
        (dict(RPC_TIMEOUT_SECONDS=0), "positive"),
        (dict(ENVIRONMENT="qa"), "Invalid environment"),
        (dict(LOG_LEVEL="LOUD"), "Invalid log level"),
    ])
    def test_validation(self, kwargs, message):
        kwargs.setdefault("ENVIRONMENT", "local")
        with pytest.raises(ConfigError, match=message):
            RouterConfig(**kwargs)

    def test_to_dict(self):
        data = RouterConfig(ENVIRONMENT="dev").to_dict()

        assert data["ENVIRONMENT"] == "dev"
        assert "INTERMEDIARY_ASSETS" in data


class TestConfigManager:
    """Combined configuration access."""

    def test_environment_override(self):
        config = ConfigManager(environment="staging")

        assert config.environment == "staging"
        assert config.router.ENVIRONMENT == "staging"
        assert repr(config) == "ConfigManager(environment=staging)"

    def test_invalid_environment(self):
        with pytest.raises(ConfigError):
            ConfigManager(environment="qa")

    def test_get_config_singleton(self):
        assert get_config(environment="local") is get_config()

    def test_reload_config(self):
        first = get_config(environment="local")
        second = reload_config(environment="dev")

        assert second is not first
        assert get_config() is second
        assert second.environment == "dev"

    def test_reload_reads_current_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "local")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        assert get_config().environment == "local"

        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("INTERMEDIARY_ASSETS", "EUR")
        config = reload_config()

        assert config.environment == "staging"
        assert config.base.LOG_LEVEL == "DEBUG"
        assert config.router.ENVIRONMENT == "staging"
        assert config.router.INTERMEDIARY_ASSETS == ("EUR",)

    def test_to_dict_sections(self):
        data = ConfigManager(environment="local").to_dict()
        assert set(data) == {"environment", "base", "router"}
