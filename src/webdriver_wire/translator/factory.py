"""Protocol Translator Factory.

Maps a :class:`WebDriverDialect` to its translator. Translators are
stateless, so one instance per dialect is cached and shared.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Type

from ..dialect import WebDriverDialect
from .base import ProtocolTranslator
from .json_wire import JsonWireProtocolTranslator
from .w3c import W3CProtocolTranslator

logger = logging.getLogger(__name__)


class WebDriverTranslatorFactory:
    """Factory for protocol translators.

    Usage:
        translator = WebDriverTranslatorFactory.create_by_dialect(WebDriverDialect.W3C)
        executable = translator.translate_command(command)
    """

    _translator_classes: Dict[WebDriverDialect, Type[ProtocolTranslator]] = {
        WebDriverDialect.JSON_WIRE: JsonWireProtocolTranslator,
        WebDriverDialect.W3C: W3CProtocolTranslator,
    }
    _translator_cache: Dict[WebDriverDialect, ProtocolTranslator] = {}
    _cache_lock = threading.Lock()

    @classmethod
    def create_by_dialect(cls, dialect: WebDriverDialect) -> ProtocolTranslator:
        """Return the translator for ``dialect``.

        Raises:
            ValueError: If ``dialect`` is not a known dialect.
        """
        dialect = WebDriverDialect(dialect)
        translator = cls._translator_cache.get(dialect)
        if translator is not None:
            return translator
        with cls._cache_lock:
            translator = cls._translator_cache.get(dialect)
            if translator is None:
                translator = cls._translator_classes[dialect]()
                cls._translator_cache[dialect] = translator
                logger.debug(f"Created {type(translator).__name__} for dialect {dialect.value}")
        return translator

    @classmethod
    def clear_cache(cls) -> None:
        with cls._cache_lock:
            cls._translator_cache.clear()


def create_by_dialect(dialect: WebDriverDialect) -> ProtocolTranslator:
    """Module-level shortcut for :meth:`WebDriverTranslatorFactory.create_by_dialect`."""
    return WebDriverTranslatorFactory.create_by_dialect(dialect)
