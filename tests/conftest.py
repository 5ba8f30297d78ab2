"""Pytest configuration for the webdriver_wire test suite."""

from __future__ import annotations

import pytest

from webdriver_wire.config import ClientConfig
from webdriver_wire.dialect import WebDriverDialect
from webdriver_wire.remote import HttpCommandExecutor, RemoteSession
from webdriver_wire.translator import W3C_ELEMENT_KEY, WebDriverTranslatorFactory

from tests.unit.helpers.fake_remote_end import FakeRemoteEnd


@pytest.fixture(autouse=True)
def _fresh_translator_cache():
    """Each test starts with an empty translator cache."""
    WebDriverTranslatorFactory.clear_cache()
    yield
    WebDriverTranslatorFactory.clear_cache()


@pytest.fixture
def remote_end() -> FakeRemoteEnd:
    return FakeRemoteEnd()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(remote_url="http://grid.test:4444/wd/hub")


@pytest.fixture
def executor(remote_end, client_config):
    with HttpCommandExecutor(client_config, transport=remote_end.transport) as executor:
        yield executor


@pytest.fixture
def w3c_session(executor) -> RemoteSession:
    return RemoteSession(executor, "w3c-session", WebDriverDialect.W3C)


@pytest.fixture
def json_wire_session(executor) -> RemoteSession:
    return RemoteSession(executor, "legacy-session", WebDriverDialect.JSON_WIRE)


@pytest.fixture
def w3c_element_ref():
    def _ref(element_id: str) -> dict:
        return {W3C_ELEMENT_KEY: element_id}

    return _ref
