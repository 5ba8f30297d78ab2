"""WebDriver wire protocol client with JSON Wire / W3C dialect translation."""

__version__ = "0.1.0"

from webdriver_wire.commands import (  # noqa: E402
    DriverCommand,
    ExecutableWebDriverCommand,
    WebDriverCommand,
)
from webdriver_wire.dialect import WebDriverDialect  # noqa: E402
from webdriver_wire.exceptions import (  # noqa: E402
    ErrorKind,
    UnsupportedCommandError,
    WebDriverError,
    WebDriverException,
)
from webdriver_wire.response import WebDriverResponse, WebDriverResponseFactory  # noqa: E402
from webdriver_wire.translator import (  # noqa: E402
    JsonWireProtocolTranslator,
    ProtocolTranslator,
    W3CProtocolTranslator,
    WebDriverTranslatorFactory,
)
from webdriver_wire.config import ClientConfig, load_client_config  # noqa: E402
from webdriver_wire.remote import (  # noqa: E402
    HttpCommandExecutor,
    RemoteSession,
    RemoteWebElement,
)

__all__ = [
    "DriverCommand",
    "ExecutableWebDriverCommand",
    "WebDriverCommand",
    "WebDriverDialect",
    "ErrorKind",
    "UnsupportedCommandError",
    "WebDriverError",
    "WebDriverException",
    "WebDriverResponse",
    "WebDriverResponseFactory",
    "JsonWireProtocolTranslator",
    "ProtocolTranslator",
    "W3CProtocolTranslator",
    "WebDriverTranslatorFactory",
    "ClientConfig",
    "load_client_config",
    "HttpCommandExecutor",
    "RemoteSession",
    "RemoteWebElement",
]
