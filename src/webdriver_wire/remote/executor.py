"""HTTP command executor.

Sends translated commands to a remote end over HTTP and decodes the
answers. All protocol knowledge lives in the translators and the response
factory; this module only moves bytes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from ..commands import DriverCommand, WebDriverCommand
from ..config import ClientConfig
from ..dialect import WebDriverDialect
from ..exceptions import (
    InvalidCommandParametersError,
    InvalidResultStateError,
    TransportError,
)
from ..response import WebDriverResponse, WebDriverResponseFactory
from ..translator import create_by_dialect

logger = logging.getLogger(__name__)


class HttpCommandExecutor:
    """Executes WebDriver commands against one remote end.

    Usage:
        with HttpCommandExecutor(load_client_config()) as executor:
            response, dialect = executor.new_session({"browserName": "firefox"})
            executor.execute(
                WebDriverCommand(response.session_id, DriverCommand.GET, {"url": url}),
                dialect,
            )
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._client = httpx.Client(
            base_url=self.config.remote_url.rstrip("/"),
            timeout=httpx.Timeout(
                self.config.request_timeout, connect=self.config.connect_timeout
            ),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json;charset=UTF-8",
                "User-Agent": self.config.user_agent,
            },
            transport=transport,
        )

    def new_session(
        self, desired_capabilities: Optional[Mapping[str, Any]] = None
    ) -> Tuple[WebDriverResponse, WebDriverDialect]:
        """Create a session and settle the dialect it speaks.

        Both capability shapes are sent so that either kind of remote end
        understands the request. Unless a dialect is configured, it is
        guessed from the response body; this is the only place guessing
        happens.

        Raises:
            SessionNotCreatedException: If the remote end refuses the session.
            InvalidResultStateError: If the response carries no session.
        """
        capabilities = dict(desired_capabilities or {})
        params = {
            "desiredCapabilities": capabilities,
            "capabilities": {"firstMatch": [capabilities]},
        }
        command = WebDriverCommand(None, DriverCommand.NEW_SESSION, params)

        # The route and body of newSession are identical in both dialects.
        results = self._send(command, WebDriverDialect.JSON_WIRE)
        dialect = self.config.dialect or _bootstrap_dialect(results)
        logger.debug(f"Remote end at {self.config.remote_url} speaks {dialect.value}")

        response = WebDriverResponseFactory.create(results, dialect)
        if response is None or not response.session_id:
            # A W3C session response without capabilities decodes to None;
            # the session id is still in the envelope.
            session_id = _session_id_from(results)
            if not session_id:
                raise InvalidResultStateError(
                    "New session response carries no session id", results
                )
            value = response.value if response is not None else None
            response = WebDriverResponse(session_id=session_id, value=value)
        return response, dialect

    def execute(
        self, command: WebDriverCommand, dialect: WebDriverDialect
    ) -> Optional[WebDriverResponse]:
        """Execute ``command`` for a session speaking ``dialect``.

        Raises:
            UnsupportedCommandError: If the dialect has no such command.
            WebDriverException: If the remote end reports an error.
            TransportError: If the HTTP exchange fails.
        """
        results = self._send(command, dialect)
        return WebDriverResponseFactory.create(results, dialect)

    def _send(self, command: WebDriverCommand, dialect: WebDriverDialect) -> Any:
        executable = create_by_dialect(dialect).translate_command(command)
        url = executable.resolve_url()
        body: Dict[str, Any] = executable.body()

        if body and executable.method != "POST":
            raise InvalidCommandParametersError(
                f"{executable.method} {url} cannot carry parameters: {sorted(body)}"
            )

        content = json.dumps(body) if executable.method == "POST" else None
        # Parameter values may hold uploads or secrets; only keys are logged
        logger.debug(f"{executable.method} {url} params={sorted(body)}")
        try:
            http_response = self._client.request(executable.method, url, content=content)
        except httpx.HTTPError as e:
            raise TransportError(
                f"{executable.method} {url} failed: {type(e).__name__}: {e}"
            ) from e

        logger.debug(f"{executable.method} {url} -> HTTP {http_response.status_code}")
        if not http_response.content:
            return {}
        try:
            return http_response.json()
        except ValueError as e:
            raise TransportError(
                f"{executable.method} {url} returned a non-JSON body "
                f"(HTTP {http_response.status_code}): {http_response.text[:200]!r}"
            ) from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpCommandExecutor":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _bootstrap_dialect(results: Any) -> WebDriverDialect:
    # W3C remote ends report a refused session as {"value": {"error": ...}},
    # which carries neither of the markers the guess looks for.
    if isinstance(results, dict):
        value = results.get("value")
        if isinstance(value, dict) and value.get("error") and "status" not in results:
            return WebDriverDialect.W3C
    return WebDriverDialect.guess_by_new_session_result_body(results)


def _session_id_from(results: Any) -> Optional[str]:
    if not isinstance(results, dict):
        return None
    value = results.get("value")
    if isinstance(value, dict) and value.get("sessionId"):
        return value["sessionId"]
    return results.get("sessionId") or None
