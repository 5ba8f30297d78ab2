"""Wire protocol dialects spoken by WebDriver remote ends."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, TypeAdapter, ValidationError


def _normalize_str(v: Any) -> Any:
    """Normalize string input: strip whitespace, lowercase, unify separators."""
    return v.strip().lower().replace("-", "_") if isinstance(v, str) else v


DialectName = Annotated[
    Literal["w3c", "json_wire", "jsonwire", "oss"],
    BeforeValidator(_normalize_str),
]

_DIALECT_NAME_ADAPTER = TypeAdapter(DialectName)


class WebDriverDialect(str, Enum):
    """The two wire protocols a remote end may speak.

    A session speaks exactly one dialect for its whole lifetime. It is
    either configured up front or guessed once from the new session
    response, then threaded through every translation and decoding call.
    """
    JSON_WIRE = "json_wire"
    W3C = "w3c"

    def is_w3c(self) -> bool:
        return self is WebDriverDialect.W3C

    @classmethod
    def guess_by_new_session_result_body(cls, results: Any) -> "WebDriverDialect":
        """Guess the dialect from the body of a *new session* response.

        W3C remote ends wrap the session id and capabilities inside
        ``value``; JSON Wire remote ends put ``sessionId`` and ``status``
        at the top level. The heuristic is only meaningful for new session
        responses and must not be applied to arbitrary command responses.
        """
        if isinstance(results, dict):
            value = results.get("value")
            if isinstance(value, dict) and ("sessionId" in value or "capabilities" in value):
                return cls.W3C
        return cls.JSON_WIRE

    @classmethod
    def parse(cls, name: Any) -> "WebDriverDialect":
        """Parse a configured dialect name (``w3c``, ``json_wire``, ``oss``).

        Raises:
            ValueError: If the name is not a known dialect.
        """
        if isinstance(name, cls):
            return name
        try:
            normalized = _DIALECT_NAME_ADAPTER.validate_python(name)
        except ValidationError as e:
            raise ValueError(f"Unknown WebDriver dialect: {name!r}") from e
        return cls.W3C if normalized == "w3c" else cls.JSON_WIRE
