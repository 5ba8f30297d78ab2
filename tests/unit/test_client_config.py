"""Tests for ClientConfig and environment loading."""

from dataclasses import FrozenInstanceError

import pytest

from webdriver_wire import __version__
from webdriver_wire.config import ClientConfig, load_client_config
from webdriver_wire.config import client_config as client_config_module
from webdriver_wire.dialect import WebDriverDialect
from webdriver_wire.exceptions import ConfigurationError

_ENV_VARS = (
    "WEBDRIVER_REMOTE_URL",
    "WEBDRIVER_DIALECT",
    "WEBDRIVER_CONNECT_TIMEOUT",
    "WEBDRIVER_REQUEST_TIMEOUT",
    "WEBDRIVER_USER_AGENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the developer's environment and .env file."""
    monkeypatch.setattr(client_config_module, "_ENV_LOADED", True)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestClientConfig:

    def test_defaults(self):
        cfg = ClientConfig()
        assert cfg.remote_url == "http://localhost:4444/wd/hub"
        assert cfg.dialect is None
        assert cfg.connect_timeout == 30.0
        assert cfg.request_timeout == 30.0
        assert cfg.user_agent == f"webdriver-wire/{__version__}"
        assert cfg.validate() == []

    def test_with_overrides(self):
        cfg = ClientConfig().with_overrides(
            remote_url="https://grid:4444",
            dialect="w3c",
            connect_timeout=5,
            request_timeout="60",
            user_agent="tests",
        )
        assert cfg == ClientConfig(
            remote_url="https://grid:4444",
            dialect=WebDriverDialect.W3C,
            connect_timeout=5.0,
            request_timeout=60.0,
            user_agent="tests",
        )

    def test_with_overrides_none_keeps_values(self):
        cfg = ClientConfig(remote_url="http://a:1")
        assert cfg.with_overrides() == cfg

    def test_frozen(self):
        cfg = ClientConfig()
        with pytest.raises(FrozenInstanceError):
            cfg.remote_url = "http://other"

    @pytest.mark.parametrize("url", ["grid:4444", "ftp://grid", "http://", ""])
    def test_validate_remote_url(self, url):
        errors = ClientConfig(remote_url=url).validate()
        assert any("remote_url" in e for e in errors)

    def test_validate_timeouts(self):
        errors = ClientConfig(connect_timeout=0, request_timeout=-1).validate()
        assert errors == ["connect_timeout must be positive", "request_timeout must be positive"]


class TestLoadClientConfig:

    def test_defaults_without_env(self):
        assert load_client_config() == ClientConfig()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WEBDRIVER_REMOTE_URL", "http://selenium:4444")
        monkeypatch.setenv("WEBDRIVER_DIALECT", "JSON-WIRE")
        monkeypatch.setenv("WEBDRIVER_CONNECT_TIMEOUT", "2.5")
        monkeypatch.setenv("WEBDRIVER_REQUEST_TIMEOUT", "90")
        monkeypatch.setenv("WEBDRIVER_USER_AGENT", "ci")

        cfg = load_client_config()

        assert cfg.remote_url == "http://selenium:4444"
        assert cfg.dialect is WebDriverDialect.JSON_WIRE
        assert cfg.connect_timeout == 2.5
        assert cfg.request_timeout == 90.0
        assert cfg.user_agent == "ci"

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("WEBDRIVER_REMOTE_URL", "http://selenium:4444")
        monkeypatch.setenv("WEBDRIVER_DIALECT", "json_wire")
        monkeypatch.setenv("WEBDRIVER_REQUEST_TIMEOUT", "90")

        cfg = load_client_config(
            remote_url="http://local:9515", dialect=WebDriverDialect.W3C, request_timeout=3
        )

        assert cfg.remote_url == "http://local:9515"
        assert cfg.dialect is WebDriverDialect.W3C
        assert cfg.request_timeout == 3.0

    @pytest.mark.parametrize("value", ["auto", "AUTO", ""])
    def test_auto_dialect(self, monkeypatch, value):
        monkeypatch.setenv("WEBDRIVER_DIALECT", value)
        assert load_client_config().dialect is None

    def test_unknown_dialect(self, monkeypatch):
        monkeypatch.setenv("WEBDRIVER_DIALECT", "selenium3")
        with pytest.raises(ConfigurationError, match="Unknown WebDriver dialect"):
            load_client_config()

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("WEBDRIVER_CONNECT_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="WEBDRIVER_CONNECT_TIMEOUT"):
            load_client_config()

    def test_validation_errors_joined(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_client_config(remote_url="grid", request_timeout=0)
        assert "; " in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_dotenv_loaded_once(self, monkeypatch):
        calls = []
        monkeypatch.setattr(client_config_module, "_ENV_LOADED", False)
        monkeypatch.setattr(client_config_module, "load_dotenv", lambda **kw: calls.append(kw))

        load_client_config()
        load_client_config()

        assert len(calls) == 1
