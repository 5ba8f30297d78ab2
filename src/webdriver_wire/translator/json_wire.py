"""Translator for the legacy JSON Wire Protocol."""
from __future__ import annotations

from typing import Any, Dict

from ..commands import DriverCommand as C
from ..dialect import WebDriverDialect
from .base import (
    JSON_WIRE_ELEMENT_KEY,
    W3C_ELEMENT_KEY,
    HttpRoute,
    ParameterRule,
    ProtocolTranslator,
    split_keys,
)

_SESSION = "/session/:sessionId"
_ELEMENT = f"{_SESSION}/element/:id"

JSON_WIRE_COMMANDS: Dict[str, HttpRoute] = {
    C.NEW_SESSION.value: ("POST", "/session"),
    C.STATUS.value: ("GET", "/status"),
    C.GET_ALL_SESSIONS.value: ("GET", "/sessions"),
    C.GET_CAPABILITIES.value: ("GET", _SESSION),
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
    C.DELETE_COOKIE.value: ("DELETE", f"{_SESSION}/cookie/:name"),
    C.DELETE_ALL_COOKIES.value: ("DELETE", f"{_SESSION}/cookie"),
    C.FIND_ELEMENT.value: ("POST", f"{_SESSION}/element"),
    C.FIND_ELEMENTS.value: ("POST", f"{_SESSION}/elements"),
    C.FIND_CHILD_ELEMENT.value: ("POST", f"{_ELEMENT}/element"),
    C.FIND_CHILD_ELEMENTS.value: ("POST", f"{_ELEMENT}/elements"),
    C.GET_ACTIVE_ELEMENT.value: ("POST", f"{_SESSION}/element/active"),
    C.CLEAR_ELEMENT.value: ("POST", f"{_ELEMENT}/clear"),
    C.CLICK_ELEMENT.value: ("POST", f"{_ELEMENT}/click"),
    C.SUBMIT_ELEMENT.value: ("POST", f"{_ELEMENT}/submit"),
    C.SEND_KEYS_TO_ELEMENT.value: ("POST", f"{_ELEMENT}/value"),
    C.SEND_KEYS_TO_ACTIVE_ELEMENT.value: ("POST", f"{_SESSION}/keys"),
    C.UPLOAD_FILE.value: ("POST", f"{_SESSION}/file"),
    C.GET_ELEMENT_TEXT.value: ("GET", f"{_ELEMENT}/text"),
    C.GET_ELEMENT_TAG_NAME.value: ("GET", f"{_ELEMENT}/name"),
    C.GET_ELEMENT_ATTRIBUTE.value: ("GET", f"{_ELEMENT}/attribute/:name"),
    C.GET_ELEMENT_VALUE_OF_CSS_PROPERTY.value: ("GET", f"{_ELEMENT}/css/:propertyName"),
    C.GET_ELEMENT_LOCATION.value: ("GET", f"{_ELEMENT}/location"),
    C.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW.value: ("GET", f"{_ELEMENT}/location_in_view"),
    C.GET_ELEMENT_SIZE.value: ("GET", f"{_ELEMENT}/size"),
    C.IS_ELEMENT_SELECTED.value: ("GET", f"{_ELEMENT}/selected"),
    C.IS_ELEMENT_ENABLED.value: ("GET", f"{_ELEMENT}/enabled"),
    C.IS_ELEMENT_DISPLAYED.value: ("GET", f"{_ELEMENT}/displayed"),
    C.ELEMENT_EQUALS.value: ("GET", f"{_ELEMENT}/equals/:other"),
    C.EXECUTE_SCRIPT.value: ("POST", f"{_SESSION}/execute"),
    C.EXECUTE_ASYNC_SCRIPT.value: ("POST", f"{_SESSION}/execute_async"),
    C.ACCEPT_ALERT.value: ("POST", f"{_SESSION}/accept_alert"),
    C.DISMISS_ALERT.value: ("POST", f"{_SESSION}/dismiss_alert"),
    C.GET_ALERT_TEXT.value: ("GET", f"{_SESSION}/alert_text"),
    C.SET_ALERT_VALUE.value: ("POST", f"{_SESSION}/alert_text"),
    C.SWITCH_TO_FRAME.value: ("POST", f"{_SESSION}/frame"),
    C.SWITCH_TO_PARENT_FRAME.value: ("POST", f"{_SESSION}/frame/parent"),
    C.SWITCH_TO_WINDOW.value: ("POST", f"{_SESSION}/window"),
    C.GET_CURRENT_WINDOW_HANDLE.value: ("GET", f"{_SESSION}/window_handle"),
    C.GET_WINDOW_HANDLES.value: ("GET", f"{_SESSION}/window_handles"),
    C.GET_WINDOW_SIZE.value: ("GET", f"{_SESSION}/window/:windowHandle/size"),
    C.GET_WINDOW_POSITION.value: ("GET", f"{_SESSION}/window/:windowHandle/position"),
    C.SET_WINDOW_SIZE.value: ("POST", f"{_SESSION}/window/:windowHandle/size"),
    C.SET_WINDOW_POSITION.value: ("POST", f"{_SESSION}/window/:windowHandle/position"),
    C.MAXIMIZE_WINDOW.value: ("POST", f"{_SESSION}/window/:windowHandle/maximize"),
    C.SCREENSHOT.value: ("GET", f"{_SESSION}/screenshot"),
    C.SET_TIMEOUT.value: ("POST", f"{_SESSION}/timeouts"),
    C.IMPLICITLY_WAIT.value: ("POST", f"{_SESSION}/timeouts/implicit_wait"),
    C.SET_SCRIPT_TIMEOUT.value: ("POST", f"{_SESSION}/timeouts/async_script"),
    C.CLICK.value: ("POST", f"{_SESSION}/click"),
    C.DOUBLE_CLICK.value: ("POST", f"{_SESSION}/doubleclick"),
    C.MOUSE_DOWN.value: ("POST", f"{_SESSION}/buttondown"),
    C.MOUSE_UP.value: ("POST", f"{_SESSION}/buttonup"),
    C.MOVE_TO.value: ("POST", f"{_SESSION}/moveto"),
    C.TOUCH_SINGLE_TAP.value: ("POST", f"{_SESSION}/touch/click"),
    C.TOUCH_DOUBLE_TAP.value: ("POST", f"{_SESSION}/touch/doubleclick"),
    C.TOUCH_LONG_PRESS.value: ("POST", f"{_SESSION}/touch/longclick"),
    C.TOUCH_DOWN.value: ("POST", f"{_SESSION}/touch/down"),
    C.TOUCH_UP.value: ("POST", f"{_SESSION}/touch/up"),
    C.TOUCH_MOVE.value: ("POST", f"{_SESSION}/touch/move"),
    C.TOUCH_SCROLL.value: ("POST", f"{_SESSION}/touch/scroll"),
    C.TOUCH_FLICK.value: ("POST", f"{_SESSION}/touch/flick"),
    C.GET_SCREEN_ORIENTATION.value: ("GET", f"{_SESSION}/orientation"),
    C.SET_SCREEN_ORIENTATION.value: ("POST", f"{_SESSION}/orientation"),
    C.GET_AVAILABLE_LOG_TYPES.value: ("GET", f"{_SESSION}/log/types"),
    C.GET_LOG.value: ("POST", f"{_SESSION}/log"),
}


def _send_keys(params: Dict[str, Any]) -> Dict[str, Any]:
    # JSON Wire expects the keys as a list of single characters.
    if "value" in params:
        params["value"] = split_keys(params["value"])
    return params


JSON_WIRE_PARAMETER_RULES: Dict[str, ParameterRule] = {
    C.SEND_KEYS_TO_ELEMENT.value: _send_keys,
    C.SEND_KEYS_TO_ACTIVE_ELEMENT.value: _send_keys,
}


class JsonWireProtocolTranslator(ProtocolTranslator):
    """Translates to the legacy JSON Wire Protocol spoken by older remote ends."""

    dialect = WebDriverDialect.JSON_WIRE
    COMMANDS = JSON_WIRE_COMMANDS
    PARAMETER_RULES = JSON_WIRE_PARAMETER_RULES
    ELEMENT_KEYS = (JSON_WIRE_ELEMENT_KEY, W3C_ELEMENT_KEY)
