"""
In-Memory Document Storage for testing and development.

NOT FOR PRODUCTION USE - data is lost on restart.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict

from .errors import StorageNotFoundError


class InMemoryDocumentStorage:
    """
    In-memory implementation of DocumentStoragePort.

    Useful for:
      - Unit testing the extract-PRD use case
      - Local development without a real bucket
    """

    def __init__(self, files: Dict[str, bytes] | None = None) -> None:
        self._files: Dict[str, bytes] = dict(files or {})
        self._lock = Lock()

    def put(self, path: str, content: bytes) -> None:
        with self._lock:
            self._files[path] = bytes(content)

    def download(self, path: str) -> bytes:
        with self._lock:
            try:
                return self._files[path]
            except KeyError:
                raise StorageNotFoundError(path) from None

    def exists(self, path: str) -> bool:
        with self._lock:
            return path in self._files
