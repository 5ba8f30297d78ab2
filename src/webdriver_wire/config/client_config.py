"""Configuration for the WebDriver HTTP client."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from .. import __version__
from ..dialect import WebDriverDialect
from ..exceptions import ConfigurationError

_DEFAULT_REMOTE_URL = "http://localhost:4444/wd/hub"
_DEFAULT_CONNECT_TIMEOUT = 30.0
_DEFAULT_REQUEST_TIMEOUT = 30.0
_AUTO_DIALECT = "auto"
_ENV_LOADED = False

ENV_REMOTE_URL = "WEBDRIVER_REMOTE_URL"
ENV_DIALECT = "WEBDRIVER_DIALECT"
ENV_CONNECT_TIMEOUT = "WEBDRIVER_CONNECT_TIMEOUT"
ENV_REQUEST_TIMEOUT = "WEBDRIVER_REQUEST_TIMEOUT"
ENV_USER_AGENT = "WEBDRIVER_USER_AGENT"


@dataclass(frozen=True)
class ClientConfig:
    """Holds runtime settings for talking to a remote end.

    ``dialect`` None means the dialect is detected once from the new
    session response.
    """

    remote_url: str = _DEFAULT_REMOTE_URL
    dialect: Optional[WebDriverDialect] = None
    connect_timeout: float = _DEFAULT_CONNECT_TIMEOUT
    request_timeout: float = _DEFAULT_REQUEST_TIMEOUT
    user_agent: str = f"webdriver-wire/{__version__}"

    def with_overrides(
        self,
        *,
        remote_url: Optional[str] = None,
        dialect: Optional[WebDriverDialect] = None,
        connect_timeout: Optional[float] = None,
        request_timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> "ClientConfig":
        """Return a copy with the provided overrides applied."""

        cfg = self
        if remote_url:
            cfg = replace(cfg, remote_url=remote_url)
        if dialect is not None:
            cfg = replace(cfg, dialect=WebDriverDialect.parse(dialect))
        if connect_timeout is not None:
            cfg = replace(cfg, connect_timeout=float(connect_timeout))
        if request_timeout is not None:
            cfg = replace(cfg, request_timeout=float(request_timeout))
        if user_agent:
            cfg = replace(cfg, user_agent=user_agent)
        return cfg

    def validate(self) -> List[str]:
        """Validate configuration values and return any errors."""
        errors = []

        parsed = urlparse(self.remote_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(f"remote_url must be an http(s) URL, got {self.remote_url!r}")

        if self.connect_timeout <= 0:
            errors.append("connect_timeout must be positive")

        if self.request_timeout <= 0:
            errors.append("request_timeout must be positive")

        return errors


def load_client_config(
    *,
    remote_url: Optional[str] = None,
    dialect: Optional[WebDriverDialect | str] = None,
    connect_timeout: Optional[float] = None,
    request_timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
) -> ClientConfig:
    """Load client configuration from environment variables and overrides.

    Raises:
        ConfigurationError: If a value cannot be parsed or fails validation.
    """

    _ensure_env_loaded()
    env_url = os.getenv(ENV_REMOTE_URL, "").strip()
    env_dialect = os.getenv(ENV_DIALECT, "").strip()
    env_user_agent = os.getenv(ENV_USER_AGENT, "").strip()

    cfg = ClientConfig().with_overrides(
        remote_url=remote_url or env_url or None,
        dialect=_resolve_dialect(dialect if dialect is not None else env_dialect),
        connect_timeout=_resolve_timeout(connect_timeout, ENV_CONNECT_TIMEOUT),
        request_timeout=_resolve_timeout(request_timeout, ENV_REQUEST_TIMEOUT),
        user_agent=user_agent or env_user_agent or None,
    )

    errors = cfg.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))
    return cfg


def _resolve_dialect(raw: Optional[WebDriverDialect | str]) -> Optional[WebDriverDialect]:
    if raw is None or raw == "" or (isinstance(raw, str) and raw.strip().lower() == _AUTO_DIALECT):
        return None
    try:
        return WebDriverDialect.parse(raw)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def _resolve_timeout(explicit: Optional[float], env_var: str) -> Optional[float]:
    if explicit is not None:
        return explicit
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{env_var} must be a number of seconds, got {raw!r}") from e


def _ensure_env_loaded() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    dotenv_path = Path.cwd() / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path)
    else:
        load_dotenv()
