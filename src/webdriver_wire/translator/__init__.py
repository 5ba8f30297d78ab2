"""Protocol translators for the JSON Wire and W3C WebDriver dialects."""
from .base import (
    JSON_WIRE_ELEMENT_KEY, W3C_ELEMENT_KEY,
    ProtocolTranslator, encode_keys, split_keys,
)
from .json_wire import JsonWireProtocolTranslator, JSON_WIRE_COMMANDS
from .w3c import W3CProtocolTranslator, W3C_COMMANDS
from .factory import WebDriverTranslatorFactory, create_by_dialect

__all__ = [
    "JSON_WIRE_ELEMENT_KEY", "W3C_ELEMENT_KEY",
    "ProtocolTranslator", "encode_keys", "split_keys",
    "JsonWireProtocolTranslator", "JSON_WIRE_COMMANDS",
    "W3CProtocolTranslator", "W3C_COMMANDS",
    "WebDriverTranslatorFactory", "create_by_dialect",
]
