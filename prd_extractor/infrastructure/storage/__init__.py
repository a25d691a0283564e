"""Adapters de infraestructura: Storage de documentos subidos."""

from .errors import (
    StorageConfigurationError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUnavailableError,
)
from .in_memory_storage import InMemoryDocumentStorage
from .local_file_storage import LocalFileStorage

__all__ = [
    "InMemoryDocumentStorage",
    "LocalFileStorage",
    "StorageError",
    "StorageConfigurationError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "StorageUnavailableError",
]
