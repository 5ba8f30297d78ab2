"""File detectors decide whether typed keys name a local file to upload."""
from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..translator import encode_keys


class FileDetector(ABC):
    @abstractmethod
    def get_local_file(self, keys: Any) -> Optional[str]:
        """Return the local file path ``keys`` refers to, or None."""


class UselessFileDetector(FileDetector):
    """Never detects a file; keys are always typed as text."""

    def get_local_file(self, keys: Any) -> Optional[str]:
        return None


class LocalFileDetector(FileDetector):
    """Detects keys that name an existing file on the local machine."""

    def get_local_file(self, keys: Any) -> Optional[str]:
        path = encode_keys(keys)
        if path and os.path.isfile(path):
            return path
        return None
