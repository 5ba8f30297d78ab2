"""WebDriver error taxonomy.

Every error raised by this library derives from :class:`WebDriverError`.
Errors reported by the remote end are :class:`WebDriverException`
subclasses, one per canonical :class:`ErrorKind`, decoded from either the
W3C string error codes or the legacy JSON Wire numeric status codes.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, NoReturn, Optional, Type


class ErrorKind(str, Enum):
    """Canonical error kinds.

    Values are the W3C error codes. Kinds that only exist in the legacy
    protocol use the lower-cased name of the legacy status.
    """
    ELEMENT_CLICK_INTERCEPTED = "element click intercepted"
    ELEMENT_NOT_INTERACTABLE = "element not interactable"
    INSECURE_CERTIFICATE = "insecure certificate"
    INVALID_ARGUMENT = "invalid argument"
    INVALID_COOKIE_DOMAIN = "invalid cookie domain"
    INVALID_ELEMENT_STATE = "invalid element state"
    INVALID_SELECTOR = "invalid selector"
    INVALID_SESSION_ID = "invalid session id"
    JAVASCRIPT_ERROR = "javascript error"
    MOVE_TARGET_OUT_OF_BOUNDS = "move target out of bounds"
    NO_SUCH_ALERT = "no such alert"
    NO_SUCH_COOKIE = "no such cookie"
    NO_SUCH_ELEMENT = "no such element"
    NO_SUCH_FRAME = "no such frame"
    NO_SUCH_WINDOW = "no such window"
    SCRIPT_TIMEOUT = "script timeout"
    SESSION_NOT_CREATED = "session not created"
    STALE_ELEMENT_REFERENCE = "stale element reference"
    TIMEOUT = "timeout"
    UNABLE_TO_SET_COOKIE = "unable to set cookie"
    UNABLE_TO_CAPTURE_SCREEN = "unable to capture screen"
    UNEXPECTED_ALERT_OPEN = "unexpected alert open"
    UNKNOWN_COMMAND = "unknown command"
    UNKNOWN_ERROR = "unknown error"
    UNKNOWN_METHOD = "unknown method"
    UNSUPPORTED_OPERATION = "unsupported operation"

    # Legacy JSON Wire only
    NO_SUCH_DRIVER = "no such driver"
    ELEMENT_NOT_VISIBLE = "element not visible"
    ELEMENT_NOT_SELECTABLE = "element not selectable"
    XPATH_LOOKUP_ERROR = "xpath lookup error"
    INVALID_ELEMENT_COORDINATES = "invalid element coordinates"
    IME_NOT_AVAILABLE = "ime not available"
    IME_ENGINE_ACTIVATION_FAILED = "ime engine activation failed"


# =============================================================================
# Local errors
# =============================================================================


class WebDriverError(Exception):
    """Base class for every error raised by webdriver_wire.

    Attributes:
        message: Human readable description.
        results: Raw decoded response body the error was derived from,
            kept for post-mortem inspection. ``None`` for local errors.
    """

    def __init__(self, message: Optional[str] = None, results: Any = None) -> None:
        self.message = message or ""
        self.results = results
        super().__init__(self.message)


class UnsupportedCommandError(WebDriverError, ValueError):
    """The command name is not part of the active dialect's command table."""

    def __init__(self, command_name: str, dialect: Any = None) -> None:
        self.command_name = command_name
        self.dialect = dialect
        dialect_label = getattr(dialect, "value", dialect)
        super().__init__(
            f"Command '{command_name}' is not supported by the "
            f"{dialect_label or 'active'} protocol"
        )


class InvalidCommandParametersError(WebDriverError, ValueError):
    """Command parameters cannot be sent to the remote end as given."""


class InvalidResultStateError(WebDriverError):
    """The remote end returned something that is not a response envelope."""


class InvalidElementReferenceError(InvalidResultStateError):
    """A web element reference carries no recognized identifier key."""


class ConfigurationError(WebDriverError, ValueError):
    """Client configuration is invalid."""


class TransportError(WebDriverError):
    """The HTTP exchange with the remote end failed."""


# =============================================================================
# Remote protocol errors
# =============================================================================


class WebDriverException(WebDriverError):
    """An error reported by the remote end.

    Subclasses pin ``kind``; the base class is never raised directly by the
    decoding functions below.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}" if self.message else self.kind.value


class UnknownErrorException(WebDriverException):
    kind = ErrorKind.UNKNOWN_ERROR


class ElementClickInterceptedException(WebDriverException):
    kind = ErrorKind.ELEMENT_CLICK_INTERCEPTED


class ElementNotInteractableException(WebDriverException):
    kind = ErrorKind.ELEMENT_NOT_INTERACTABLE


class InsecureCertificateException(WebDriverException):
    kind = ErrorKind.INSECURE_CERTIFICATE


class InvalidArgumentException(WebDriverException):
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidCookieDomainException(WebDriverException):
    kind = ErrorKind.INVALID_COOKIE_DOMAIN


class InvalidElementStateException(WebDriverException):
    kind = ErrorKind.INVALID_ELEMENT_STATE


class ElementNotVisibleException(InvalidElementStateException):
    kind = ErrorKind.ELEMENT_NOT_VISIBLE


class ElementNotSelectableException(InvalidElementStateException):
    kind = ErrorKind.ELEMENT_NOT_SELECTABLE


class InvalidSelectorException(WebDriverException):
    kind = ErrorKind.INVALID_SELECTOR


class XPathLookupException(InvalidSelectorException):
    kind = ErrorKind.XPATH_LOOKUP_ERROR


class InvalidSessionIdException(WebDriverException):
    kind = ErrorKind.INVALID_SESSION_ID


class JavascriptErrorException(WebDriverException):
    kind = ErrorKind.JAVASCRIPT_ERROR


class MoveTargetOutOfBoundsException(WebDriverException):
    kind = ErrorKind.MOVE_TARGET_OUT_OF_BOUNDS


class InvalidElementCoordinatesException(WebDriverException):
    kind = ErrorKind.INVALID_ELEMENT_COORDINATES


class NoSuchAlertException(WebDriverException):
    kind = ErrorKind.NO_SUCH_ALERT


class NoSuchCookieException(WebDriverException):
    kind = ErrorKind.NO_SUCH_COOKIE


class NoSuchDriverException(WebDriverException):
    kind = ErrorKind.NO_SUCH_DRIVER


class NoSuchElementException(WebDriverException):
    kind = ErrorKind.NO_SUCH_ELEMENT


class NoSuchFrameException(WebDriverException):
    kind = ErrorKind.NO_SUCH_FRAME


class NoSuchWindowException(WebDriverException):
    kind = ErrorKind.NO_SUCH_WINDOW


class TimeoutException(WebDriverException):
    kind = ErrorKind.TIMEOUT


class ScriptTimeoutException(TimeoutException):
    kind = ErrorKind.SCRIPT_TIMEOUT


class SessionNotCreatedException(WebDriverException):
    kind = ErrorKind.SESSION_NOT_CREATED


class StaleElementReferenceException(WebDriverException):
    kind = ErrorKind.STALE_ELEMENT_REFERENCE


class UnableToSetCookieException(WebDriverException):
    kind = ErrorKind.UNABLE_TO_SET_COOKIE


class UnableToCaptureScreenException(WebDriverException):
    kind = ErrorKind.UNABLE_TO_CAPTURE_SCREEN


class UnexpectedAlertOpenException(WebDriverException):
    kind = ErrorKind.UNEXPECTED_ALERT_OPEN


class UnknownCommandException(WebDriverException):
    kind = ErrorKind.UNKNOWN_COMMAND


class UnknownMethodException(WebDriverException):
    kind = ErrorKind.UNKNOWN_METHOD


class UnsupportedOperationException(WebDriverException):
    kind = ErrorKind.UNSUPPORTED_OPERATION


class IMENotAvailableException(WebDriverException):
    kind = ErrorKind.IME_NOT_AVAILABLE


class IMEEngineActivationFailedException(WebDriverException):
    kind = ErrorKind.IME_ENGINE_ACTIVATION_FAILED


EXCEPTION_BY_KIND: Dict[ErrorKind, Type[WebDriverException]] = {
    cls.kind: cls
    for cls in (
        UnknownErrorException,
        ElementClickInterceptedException,
        ElementNotInteractableException,
        InsecureCertificateException,
        InvalidArgumentException,
        InvalidCookieDomainException,
        InvalidElementStateException,
        ElementNotVisibleException,
        ElementNotSelectableException,
        InvalidSelectorException,
        XPathLookupException,
        InvalidSessionIdException,
        JavascriptErrorException,
        MoveTargetOutOfBoundsException,
        InvalidElementCoordinatesException,
        NoSuchAlertException,
        NoSuchCookieException,
        NoSuchDriverException,
        NoSuchElementException,
        NoSuchFrameException,
        NoSuchWindowException,
        TimeoutException,
        ScriptTimeoutException,
        SessionNotCreatedException,
        StaleElementReferenceException,
        UnableToSetCookieException,
        UnableToCaptureScreenException,
        UnexpectedAlertOpenException,
        UnknownCommandException,
        UnknownMethodException,
        UnsupportedOperationException,
        IMENotAvailableException,
        IMEEngineActivationFailedException,
    )
}

# W3C error code -> kind
W3C_ERROR_CODES: Dict[str, ErrorKind] = {
    kind.value: kind
    for kind in (
        ErrorKind.ELEMENT_CLICK_INTERCEPTED,
        ErrorKind.ELEMENT_NOT_INTERACTABLE,
        ErrorKind.INSECURE_CERTIFICATE,
        ErrorKind.INVALID_ARGUMENT,
        ErrorKind.INVALID_COOKIE_DOMAIN,
        ErrorKind.INVALID_ELEMENT_STATE,
        ErrorKind.INVALID_SELECTOR,
        ErrorKind.INVALID_SESSION_ID,
        ErrorKind.JAVASCRIPT_ERROR,
        ErrorKind.MOVE_TARGET_OUT_OF_BOUNDS,
        ErrorKind.NO_SUCH_ALERT,
        ErrorKind.NO_SUCH_COOKIE,
        ErrorKind.NO_SUCH_ELEMENT,
        ErrorKind.NO_SUCH_FRAME,
        ErrorKind.NO_SUCH_WINDOW,
        ErrorKind.SCRIPT_TIMEOUT,
        ErrorKind.SESSION_NOT_CREATED,
        ErrorKind.STALE_ELEMENT_REFERENCE,
        ErrorKind.TIMEOUT,
        ErrorKind.UNABLE_TO_SET_COOKIE,
        ErrorKind.UNABLE_TO_CAPTURE_SCREEN,
        ErrorKind.UNEXPECTED_ALERT_OPEN,
        ErrorKind.UNKNOWN_COMMAND,
        ErrorKind.UNKNOWN_ERROR,
        ErrorKind.UNKNOWN_METHOD,
        ErrorKind.UNSUPPORTED_OPERATION,
    )
}

# JSON Wire status -> kind. Codes 1-5, 14, 16, 18, 20 and 22 were internal
# to the old Selenium server and fall through to UNKNOWN_ERROR.
LEGACY_STATUS_CODES: Dict[int, ErrorKind] = {
    6: ErrorKind.NO_SUCH_DRIVER,
    7: ErrorKind.NO_SUCH_ELEMENT,
    8: ErrorKind.NO_SUCH_FRAME,
    9: ErrorKind.UNKNOWN_COMMAND,
    10: ErrorKind.STALE_ELEMENT_REFERENCE,
    11: ErrorKind.ELEMENT_NOT_VISIBLE,
    12: ErrorKind.INVALID_ELEMENT_STATE,
    13: ErrorKind.UNKNOWN_ERROR,
    15: ErrorKind.ELEMENT_NOT_SELECTABLE,
    17: ErrorKind.JAVASCRIPT_ERROR,
    19: ErrorKind.XPATH_LOOKUP_ERROR,
    21: ErrorKind.TIMEOUT,
    23: ErrorKind.NO_SUCH_WINDOW,
    24: ErrorKind.INVALID_COOKIE_DOMAIN,
    25: ErrorKind.UNABLE_TO_SET_COOKIE,
    26: ErrorKind.UNEXPECTED_ALERT_OPEN,
    27: ErrorKind.NO_SUCH_ALERT,
    28: ErrorKind.SCRIPT_TIMEOUT,
    29: ErrorKind.INVALID_ELEMENT_COORDINATES,
    30: ErrorKind.IME_NOT_AVAILABLE,
    31: ErrorKind.IME_ENGINE_ACTIVATION_FAILED,
    32: ErrorKind.INVALID_SELECTOR,
    33: ErrorKind.SESSION_NOT_CREATED,
    34: ErrorKind.MOVE_TARGET_OUT_OF_BOUNDS,
}


def parse_status_code(status: Any) -> Optional[int]:
    """Return ``status`` as an int, or None if it is not numeric.

    Integers, integral floats and numeric strings are accepted. Booleans
    are not numeric status codes.
    """
    if isinstance(status, bool):
        return None
    if isinstance(status, int):
        return status
    if isinstance(status, float):
        return int(status) if status.is_integer() else None
    if isinstance(status, str):
        try:
            return int(status.strip())
        except ValueError:
            return None
    return None


def exception_for_w3c(error: Any, results: Any = None) -> WebDriverException:
    """Build the exception matching a W3C error code.

    The message is read from ``results["value"]["message"]`` when present.
    Unknown codes produce an :class:`UnknownErrorException`.
    """
    message = None
    if isinstance(results, dict) and isinstance(results.get("value"), dict):
        message = results["value"].get("message")

    kind = W3C_ERROR_CODES.get(error) if isinstance(error, str) else None
    if kind is None:
        kind = ErrorKind.UNKNOWN_ERROR
        note = f"unrecognized error code: {error!r}"
        message = f"{message} ({note})" if message else f"Unrecognized error code: {error!r}"
    return EXCEPTION_BY_KIND[kind](message, results)


def exception_for_status(
    status: Any, message: Optional[str] = None, results: Any = None
) -> WebDriverException:
    """Build the exception matching a legacy JSON Wire status code.

    Unknown or non-numeric statuses produce an :class:`UnknownErrorException`.
    """
    code = parse_status_code(status)
    kind = LEGACY_STATUS_CODES.get(code) if code is not None else None
    if kind is None:
        kind = ErrorKind.UNKNOWN_ERROR
        note = f"unrecognized status: {status!r}"
        message = f"{message} ({note})" if message else f"Unrecognized status: {status!r}"
    return EXCEPTION_BY_KIND[kind](message, results)


def throw_exception_for_w3c(error: Any, results: Any = None) -> NoReturn:
    """Raise the exception matching a W3C error code."""
    raise exception_for_w3c(error, results)


def throw_exception(status: Any, message: Optional[str] = None, results: Any = None) -> NoReturn:
    """Raise the exception matching a legacy JSON Wire status code."""
    raise exception_for_status(status, message, results)
