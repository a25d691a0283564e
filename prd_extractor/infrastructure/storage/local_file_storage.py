"""
===============================================================================
CRC CARD - infrastructure/storage/local_file_storage.py
===============================================================================

Clase:
  LocalFileStorage (Adapter)

Responsabilidades:
  - Implementar DocumentStoragePort sobre un directorio local.
  - Resolver storage paths ("uploads/prd.pdf") relativos a una raíz.
  - Rechazar paths que escapan de la raíz (../, absolutos).
  - Mapear OSError -> StorageError tipado.

Colaboradores:
  - domain.services.DocumentStoragePort (port)
  - infrastructure.storage.errors (errores tipados)
===============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path

from ...domain.services import DocumentStoragePort
from .errors import (
    StorageConfigurationError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)


class LocalFileStorage(DocumentStoragePort):
    """Storage de documentos respaldado por el filesystem local."""

    def __init__(self, root: str | Path) -> None:
        root_path = Path(root).expanduser()
        if not root_path.is_dir():
            raise StorageConfigurationError(
                f"La raíz de storage no es un directorio: {root_path}"
            )
        self._root = root_path.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def download(self, path: str) -> bytes:
        """
        Lee el documento completo.

        Errores:
          - StorageNotFoundError si no existe (o es un directorio).
          - StoragePermissionError si el path escapa de la raíz.
          - StorageUnavailableError ante otros errores de I/O.
        """
        target = self._resolve(path)

        if not target.is_file():
            raise StorageNotFoundError(path)

        try:
            return target.read_bytes()
        except PermissionError as exc:
            raise StoragePermissionError(
                f"Sin permisos de lectura. path={path}"
            ) from exc
        except OSError as exc:
            logger.error(
                "Local storage read failed",
                extra={"storage_path": path, "error": str(exc)},
            )
            raise StorageUnavailableError(f"Error leyendo {path}: {exc}") from exc

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except (StorageNotFoundError, StoragePermissionError):
            return False

    def _resolve(self, path: str) -> Path:
        relative = (path or "").strip().lstrip("/\\")
        if not relative:
            raise StorageNotFoundError(path)

        target = (self._root / relative).resolve()
        if target != self._root and self._root not in target.parents:
            raise StoragePermissionError(f"Path fuera de la raíz de storage: {path}")
        return target
