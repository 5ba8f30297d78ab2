"""HTTP transport, sessions and elements built on the protocol core."""
from .element import RemoteWebElement, WebDriverDimension, WebDriverPoint
from .executor import HttpCommandExecutor
from .file_detector import FileDetector, LocalFileDetector, UselessFileDetector
from .session import RemoteSession

__all__ = [
    "RemoteWebElement", "WebDriverDimension", "WebDriverPoint",
    "HttpCommandExecutor",
    "FileDetector", "LocalFileDetector", "UselessFileDetector",
    "RemoteSession",
]
