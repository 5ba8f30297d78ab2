"""Translator for the W3C WebDriver protocol.

Besides the different routes, W3C remote ends reject several parameter
shapes the JSON Wire Protocol accepted. The rules below rewrite them:

- send keys carries both ``text`` (string) and ``value`` (characters)
- only css selector, link text, partial link text, tag name and xpath are
  valid locator strategies; id, name and class name become css selectors
- timeouts are a single ``{implicit|script|pageLoad: ms}`` mapping
- window commands act on the current window (no ``:windowHandle``)
- script execution always carries an ``args`` list
"""
from __future__ import annotations

from typing import Any, Dict

from ..commands import DriverCommand as C
from ..dialect import WebDriverDialect
from ..exceptions import InvalidCommandParametersError
from .base import (
    JSON_WIRE_ELEMENT_KEY,
    W3C_ELEMENT_KEY,
    HttpRoute,
    ParameterRule,
    ProtocolTranslator,
    encode_keys,
    split_keys,
)

_SESSION = "/session/:sessionId"
_ELEMENT = f"{_SESSION}/element/:id"

W3C_COMMANDS: Dict[str, HttpRoute] = {
    C.NEW_SESSION.value: ("POST", "/session"),
    C.STATUS.value: ("GET", "/status"),
    C.QUIT.value: ("DELETE", _SESSION),
    C.CLOSE.value: ("DELETE", f"{_SESSION}/window"),
    C.GET.value: ("POST", f"{_SESSION}/url"),
    C.GET_CURRENT_URL.value: ("GET", f"{_SESSION}/url"),
    C.GO_BACK.value: ("POST", f"{_SESSION}/back"),
    C.GO_FORWARD.value: ("POST", f"{_SESSION}/forward"),
    C.REFRESH.value: ("POST", f"{_SESSION}/refresh"),
    C.GET_TITLE.value: ("GET", f"{_SESSION}/title"),
    C.GET_PAGE_SOURCE.value: ("GET", f"{_SESSION}/source"),
    C.ADD_COOKIE.value: ("POST", f"{_SESSION}/cookie"),
    C.GET_ALL_COOKIES.value: ("GET", f"{_SESSION}/cookie"),
    C.GET_NAMED_COOKIE.value: ("GET", f"{_SESSION}/cookie/:name"),
    C.DELETE_COOKIE.value: ("DELETE", f"{_SESSION}/cookie/:name"),
    C.DELETE_ALL_COOKIES.value: ("DELETE", f"{_SESSION}/cookie"),
    C.FIND_ELEMENT.value: ("POST", f"{_SESSION}/element"),
    C.FIND_ELEMENTS.value: ("POST", f"{_SESSION}/elements"),
    C.FIND_CHILD_ELEMENT.value: ("POST", f"{_ELEMENT}/element"),
    C.FIND_CHILD_ELEMENTS.value: ("POST", f"{_ELEMENT}/elements"),
    C.GET_ACTIVE_ELEMENT.value: ("GET", f"{_SESSION}/element/active"),
    C.CLEAR_ELEMENT.value: ("POST", f"{_ELEMENT}/clear"),
    C.CLICK_ELEMENT.value: ("POST", f"{_ELEMENT}/click"),
    C.SEND_KEYS_TO_ELEMENT.value: ("POST", f"{_ELEMENT}/value"),
    C.UPLOAD_FILE.value: ("POST", f"{_SESSION}/se/file"),
    C.GET_ELEMENT_TEXT.value: ("GET", f"{_ELEMENT}/text"),
    C.GET_ELEMENT_TAG_NAME.value: ("GET", f"{_ELEMENT}/name"),
    C.GET_ELEMENT_ATTRIBUTE.value: ("GET", f"{_ELEMENT}/attribute/:name"),
    C.GET_ELEMENT_PROPERTY.value: ("GET", f"{_ELEMENT}/property/:name"),
    C.GET_ELEMENT_VALUE_OF_CSS_PROPERTY.value: ("GET", f"{_ELEMENT}/css/:propertyName"),
    C.GET_ELEMENT_LOCATION.value: ("GET", f"{_ELEMENT}/rect"),
    C.GET_ELEMENT_SIZE.value: ("GET", f"{_ELEMENT}/rect"),
    C.IS_ELEMENT_SELECTED.value: ("GET", f"{_ELEMENT}/selected"),
    C.IS_ELEMENT_ENABLED.value: ("GET", f"{_ELEMENT}/enabled"),
    C.IS_ELEMENT_DISPLAYED.value: ("GET", f"{_ELEMENT}/displayed"),
    C.TAKE_ELEMENT_SCREENSHOT.value: ("GET", f"{_ELEMENT}/screenshot"),
    C.EXECUTE_SCRIPT.value: ("POST", f"{_SESSION}/execute/sync"),
    C.EXECUTE_ASYNC_SCRIPT.value: ("POST", f"{_SESSION}/execute/async"),
    C.ACCEPT_ALERT.value: ("POST", f"{_SESSION}/alert/accept"),
    C.DISMISS_ALERT.value: ("POST", f"{_SESSION}/alert/dismiss"),
    C.GET_ALERT_TEXT.value: ("GET", f"{_SESSION}/alert/text"),
    C.SET_ALERT_VALUE.value: ("POST", f"{_SESSION}/alert/text"),
    C.SWITCH_TO_FRAME.value: ("POST", f"{_SESSION}/frame"),
    C.SWITCH_TO_PARENT_FRAME.value: ("POST", f"{_SESSION}/frame/parent"),
    C.SWITCH_TO_WINDOW.value: ("POST", f"{_SESSION}/window"),
    C.GET_CURRENT_WINDOW_HANDLE.value: ("GET", f"{_SESSION}/window"),
    C.GET_WINDOW_HANDLES.value: ("GET", f"{_SESSION}/window/handles"),
    C.GET_WINDOW_SIZE.value: ("GET", f"{_SESSION}/window/rect"),
    C.GET_WINDOW_POSITION.value: ("GET", f"{_SESSION}/window/rect"),
    C.SET_WINDOW_SIZE.value: ("POST", f"{_SESSION}/window/rect"),
    C.SET_WINDOW_POSITION.value: ("POST", f"{_SESSION}/window/rect"),
    C.MAXIMIZE_WINDOW.value: ("POST", f"{_SESSION}/window/maximize"),
    C.MINIMIZE_WINDOW.value: ("POST", f"{_SESSION}/window/minimize"),
    C.FULLSCREEN_WINDOW.value: ("POST", f"{_SESSION}/window/fullscreen"),
    C.SCREENSHOT.value: ("GET", f"{_SESSION}/screenshot"),
    C.SET_TIMEOUT.value: ("POST", f"{_SESSION}/timeouts"),
    C.IMPLICITLY_WAIT.value: ("POST", f"{_SESSION}/timeouts"),
    C.SET_SCRIPT_TIMEOUT.value: ("POST", f"{_SESSION}/timeouts"),
    C.ACTIONS.value: ("POST", f"{_SESSION}/actions"),
}

# Legacy timeout type -> W3C timeouts key
_TIMEOUT_TYPES = {
    "implicit": "implicit",
    "script": "script",
    "page load": "pageLoad",
    "pageLoad": "pageLoad",
}


def _quote_attribute(value: Any) -> str:
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def _escape_identifier(value: str) -> str:
    """Escape ``value`` for use as a CSS identifier (CSSOM serialization)."""
    if value == "-":
        return "\\-"
    escaped = []
    for index, char in enumerate(value):
        code = ord(char)
        if code == 0:
            escaped.append("\ufffd")
        elif 0x1 <= code <= 0x1F or code == 0x7F:
            escaped.append(f"\\{code:x} ")
        elif char.isdigit() and char.isascii() and (
            index == 0 or (index == 1 and value[0] == "-")
        ):
            escaped.append(f"\\{code:x} ")
        elif char.isascii() and not (char.isalnum() or char in "-_"):
            escaped.append(f"\\{char}")
        else:
            escaped.append(char)
    return "".join(escaped)


def _class_selector(value: Any) -> str:
    name = str(value)
    if not name or any(char.isspace() for char in name):
        raise InvalidCommandParametersError(
            f"Class name locator takes a single class, got {name!r}"
        )
    return f".{_escape_identifier(name)}"


def _send_keys(params: Dict[str, Any]) -> Dict[str, Any]:
    if "value" in params:
        params["text"] = encode_keys(params["value"])
        params["value"] = split_keys(params["value"])
    return params


def _find_element(params: Dict[str, Any]) -> Dict[str, Any]:
    using = params.get("using")
    value = params.get("value")
    if using == "id":
        params["using"] = "css selector"
        params["value"] = f'[id="{_quote_attribute(value)}"]'
    elif using == "name":
        params["using"] = "css selector"
        params["value"] = f'[name="{_quote_attribute(value)}"]'
    elif using == "class name":
        params["using"] = "css selector"
        params["value"] = _class_selector(value)
    return params


def _timeout(key: str) -> ParameterRule:
    def rule(params: Dict[str, Any]) -> Dict[str, Any]:
        if "ms" in params:
            params[key] = params.pop("ms")
        return params

    return rule


def _set_timeout(params: Dict[str, Any]) -> Dict[str, Any]:
    key = _TIMEOUT_TYPES.get(params.get("type"))
    if key is not None and "ms" in params:
        ms = params.pop("ms")
        params.pop("type")
        params[key] = ms
    return params


def _switch_to_window(params: Dict[str, Any]) -> Dict[str, Any]:
    if "name" in params and "handle" not in params:
        params["handle"] = params.pop("name")
    return params


def _current_window(params: Dict[str, Any]) -> Dict[str, Any]:
    params.pop(":windowHandle", None)
    return params


def _execute_script(params: Dict[str, Any]) -> Dict[str, Any]:
    params.setdefault("args", [])
    return params


W3C_PARAMETER_RULES: Dict[str, ParameterRule] = {
    C.SEND_KEYS_TO_ELEMENT.value: _send_keys,
    C.SEND_KEYS_TO_ACTIVE_ELEMENT.value: _send_keys,
    C.FIND_ELEMENT.value: _find_element,
    C.FIND_ELEMENTS.value: _find_element,
    C.FIND_CHILD_ELEMENT.value: _find_element,
    C.FIND_CHILD_ELEMENTS.value: _find_element,
    C.IMPLICITLY_WAIT.value: _timeout("implicit"),
    C.SET_SCRIPT_TIMEOUT.value: _timeout("script"),
    C.SET_TIMEOUT.value: _set_timeout,
    C.SWITCH_TO_WINDOW.value: _switch_to_window,
    C.GET_WINDOW_SIZE.value: _current_window,
    C.GET_WINDOW_POSITION.value: _current_window,
    C.SET_WINDOW_SIZE.value: _current_window,
    C.SET_WINDOW_POSITION.value: _current_window,
    C.MAXIMIZE_WINDOW.value: _current_window,
    C.EXECUTE_SCRIPT.value: _execute_script,
    C.EXECUTE_ASYNC_SCRIPT.value: _execute_script,
}


class W3CProtocolTranslator(ProtocolTranslator):
    """Translates to the W3C WebDriver standard."""

    dialect = WebDriverDialect.W3C
    COMMANDS = W3C_COMMANDS
    PARAMETER_RULES = W3C_PARAMETER_RULES
    ELEMENT_KEYS = (W3C_ELEMENT_KEY, JSON_WIRE_ELEMENT_KEY)
