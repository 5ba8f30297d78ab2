"""Response decoding.

Turns a raw decoded response body into a :class:`WebDriverResponse`,
raises the protocol exception it encodes, or returns ``None`` when the
body carries no actionable session or value information.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .dialect import WebDriverDialect
from .exceptions import (
    InvalidResultStateError,
    parse_status_code,
    throw_exception,
    throw_exception_for_w3c,
)

# Marker geckodriver puts in the value of a session response
_FIREFOX_PROFILE_KEY = "moz:profile"


@dataclass(frozen=True)
class WebDriverResponse:
    """Dialect-independent result of one command.

    Attributes:
        session_id: Session id reported by the remote end, if any.
        status: Numeric status (JSON Wire only; None under W3C).
        value: Decoded payload.
    """
    session_id: Optional[str] = None
    status: Optional[int] = None
    value: Any = None


def _require_mapping(results: Any) -> None:
    if not isinstance(results, dict):
        raise InvalidResultStateError("Invalid result state", results)


def _legacy_message(results: dict) -> Optional[str]:
    value = results.get("value")
    if isinstance(value, dict) and value.get("message"):
        return value["message"]
    return results.get("message") or None


class WebDriverResponseFactory:
    """Builds :class:`WebDriverResponse` objects from raw response bodies."""

    @classmethod
    def create(
        cls, results: Any, dialect: Optional[WebDriverDialect] = None
    ) -> Optional[WebDriverResponse]:
        """Decode a raw response body.

        Args:
            results: Decoded JSON body.
            dialect: Dialect of the session. When omitted it is guessed
                from ``results``, which is only valid for the body of a
                new session response.

        Returns:
            The normalized response, or None when the body carries no
            session or value information.

        Raises:
            InvalidResultStateError: If ``results`` is not a mapping.
            WebDriverException: If the body encodes a remote error.
        """
        if dialect is None:
            dialect = WebDriverDialect.guess_by_new_session_result_body(results)
        cls.check_executor_result(dialect, results)

        if dialect.is_w3c():
            return cls.create_w3c_protocol(results)
        return cls.create_json_wire_protocol(results)

    @staticmethod
    def check_executor_result(dialect: WebDriverDialect, results: Any) -> None:
        """Raise if ``results`` is malformed or encodes a remote error."""
        _require_mapping(results)

        if dialect.is_w3c():
            value = results.get("value")
            if isinstance(value, dict) and value.get("error"):
                throw_exception_for_w3c(value["error"], results)
        else:
            status = parse_status_code(results.get("status"))
            if status is not None and status > 0:
                throw_exception(results["status"], _legacy_message(results), results)

    @staticmethod
    def create_json_wire_protocol(results: Any) -> Optional[WebDriverResponse]:
        _require_mapping(results)
        if results.get("status") is None:
            return None

        value = results.get("value")
        session_id = results.get("sessionId")
        raw_status = results["status"]

        # Checked again for callers that skip check_executor_result
        status = parse_status_code(raw_status)
        if status != 0:
            throw_exception(raw_status, _legacy_message(results), results)

        return WebDriverResponse(session_id=session_id, status=status, value=value)

    @staticmethod
    def create_w3c_protocol(results: Any) -> Optional[WebDriverResponse]:
        _require_mapping(results)
        value = results.get("value")

        session_id = None
        if isinstance(value, dict):
            if value.get("sessionId"):
                value = dict(value)
                session_id = value.pop("sessionId")
            elif results.get("sessionId"):
                session_id = results["sessionId"]

            if value.get("capabilities"):
                value = value["capabilities"]
            elif session_id is not None and not value.get(_FIREFOX_PROFILE_KEY):
                return None

            if isinstance(value, dict) and value.get("error"):
                throw_exception_for_w3c(value["error"], results)

        return WebDriverResponse(session_id=session_id, value=value)
