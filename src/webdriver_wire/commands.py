"""Command vocabulary and command value objects.

Immutable types that carry no identity. Equality is structural.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

from .exceptions import InvalidCommandParametersError


class DriverCommand(str, Enum):
    """Dialect-independent command names shared by callers and translators.

    Not every command exists in both protocols; each translator's table
    decides which ones it can send.
    """
    NEW_SESSION = "newSession"
    STATUS = "status"
    GET_ALL_SESSIONS = "getSessions"
    GET_CAPABILITIES = "getCapabilities"
    QUIT = "quit"
    CLOSE = "close"

    # Navigation
    GET = "get"
    GET_CURRENT_URL = "getCurrentUrl"
    GO_BACK = "goBack"
    GO_FORWARD = "goForward"
    REFRESH = "refresh"
    GET_TITLE = "getTitle"
    GET_PAGE_SOURCE = "getPageSource"

    # Cookies
    ADD_COOKIE = "addCookie"
    GET_ALL_COOKIES = "getCookies"
    GET_NAMED_COOKIE = "getCookie"
    DELETE_COOKIE = "deleteCookie"
    DELETE_ALL_COOKIES = "deleteAllCookies"

    # Elements
    FIND_ELEMENT = "findElement"
    FIND_ELEMENTS = "findElements"
    FIND_CHILD_ELEMENT = "findChildElement"
    FIND_CHILD_ELEMENTS = "findChildElements"
    GET_ACTIVE_ELEMENT = "getActiveElement"
    CLEAR_ELEMENT = "clearElement"
    CLICK_ELEMENT = "clickElement"
    SUBMIT_ELEMENT = "submitElement"
    SEND_KEYS_TO_ELEMENT = "sendKeysToElement"
    SEND_KEYS_TO_ACTIVE_ELEMENT = "sendKeysToActiveElement"
    UPLOAD_FILE = "uploadFile"
    GET_ELEMENT_TEXT = "getElementText"
    GET_ELEMENT_TAG_NAME = "getElementTagName"
    GET_ELEMENT_ATTRIBUTE = "getElementAttribute"
    GET_ELEMENT_PROPERTY = "getElementProperty"
    GET_ELEMENT_VALUE_OF_CSS_PROPERTY = "getElementValueOfCssProperty"
    GET_ELEMENT_LOCATION = "getElementLocation"
    GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW = "getElementLocationOnceScrolledIntoView"
    GET_ELEMENT_SIZE = "getElementSize"
    IS_ELEMENT_SELECTED = "isElementSelected"
    IS_ELEMENT_ENABLED = "isElementEnabled"
    IS_ELEMENT_DISPLAYED = "isElementDisplayed"
    ELEMENT_EQUALS = "elementEquals"
    TAKE_ELEMENT_SCREENSHOT = "takeElementScreenshot"

    # Scripts
    EXECUTE_SCRIPT = "executeScript"
    EXECUTE_ASYNC_SCRIPT = "executeAsyncScript"

    # Alerts
    ACCEPT_ALERT = "acceptAlert"
    DISMISS_ALERT = "dismissAlert"
    GET_ALERT_TEXT = "getAlertText"
    SET_ALERT_VALUE = "setAlertValue"

    # Frames and windows
    SWITCH_TO_FRAME = "switchToFrame"
    SWITCH_TO_PARENT_FRAME = "switchToParentFrame"
    SWITCH_TO_WINDOW = "switchToWindow"
    GET_CURRENT_WINDOW_HANDLE = "getCurrentWindowHandle"
    GET_WINDOW_HANDLES = "getWindowHandles"
    GET_WINDOW_SIZE = "getWindowSize"
    GET_WINDOW_POSITION = "getWindowPosition"
    SET_WINDOW_SIZE = "setWindowSize"
    SET_WINDOW_POSITION = "setWindowPosition"
    MAXIMIZE_WINDOW = "maximizeWindow"
    MINIMIZE_WINDOW = "minimizeWindow"
    FULLSCREEN_WINDOW = "fullscreenWindow"
    SCREENSHOT = "screenshot"

    # Timeouts
    SET_TIMEOUT = "setTimeout"
    IMPLICITLY_WAIT = "implicitlyWait"
    SET_SCRIPT_TIMEOUT = "setScriptTimeout"

    # Interactions
    ACTIONS = "actions"
    CLICK = "mouseClick"
    DOUBLE_CLICK = "mouseDoubleClick"
    MOUSE_DOWN = "mouseButtonDown"
    MOUSE_UP = "mouseButtonUp"
    MOVE_TO = "mouseMoveTo"
    TOUCH_SINGLE_TAP = "touchSingleTap"
    TOUCH_DOUBLE_TAP = "touchDoubleTap"
    TOUCH_LONG_PRESS = "touchLongPress"
    TOUCH_DOWN = "touchDown"
    TOUCH_UP = "touchUp"
    TOUCH_MOVE = "touchMove"
    TOUCH_SCROLL = "touchScroll"
    TOUCH_FLICK = "touchFlick"

    # Device and logs
    GET_SCREEN_ORIENTATION = "getScreenOrientation"
    SET_SCREEN_ORIENTATION = "setScreenOrientation"
    GET_AVAILABLE_LOG_TYPES = "getAvailableLogTypes"
    GET_LOG = "getLog"


CommandName = Union[DriverCommand, str]


def command_name(name: CommandName) -> str:
    """Return the wire token of a command name (enum member or plain string)."""
    return name.value if isinstance(name, DriverCommand) else str(name)


def _freeze(parameters: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(parameters or {}))


@dataclass(frozen=True)
class WebDriverCommand:
    """An abstract, dialect-independent command invocation.

    Attributes:
        session_id: Session the command targets; None for session-less
            commands such as ``newSession`` and ``status``.
        name: Command name from :class:`DriverCommand` (plain strings are
            accepted so that unknown names reach the translator).
        parameters: Parameter mapping. Keys starting with ``:`` fill URL
            placeholders; the rest form the request body. Copied into a
            read-only mapping on construction, so commands are unhashable.
    """
    session_id: Optional[str]
    name: CommandName
    parameters: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", _freeze(self.parameters))

    @property
    def name_token(self) -> str:
        return command_name(self.name)


_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class ExecutableWebDriverCommand:
    """A command ready for the transport: HTTP method, URL template, parameters."""
    method: str
    url: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    session_id: Optional[str] = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", _freeze(self.parameters))

    def resolve_url(self) -> str:
        """Fill ``:sessionId`` and every ``:name`` placeholder of the URL template.

        Raises:
            InvalidCommandParametersError: If a placeholder has no value.
        """

        def _substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name == "sessionId":
                value = self.session_id
            else:
                value = self.parameters.get(f":{name}")
            if value is None:
                raise InvalidCommandParametersError(
                    f"Missing value for URL placeholder ':{name}' in {self.url}"
                )
            return quote(str(value), safe="")

        return _PLACEHOLDER.sub(_substitute, self.url)

    def body(self) -> Dict[str, Any]:
        """Parameters that are not URL placeholders."""
        return {k: v for k, v in self.parameters.items() if not k.startswith(":")}
