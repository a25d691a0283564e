"""
===============================================================================
CRC CARD - infrastructure/storage/errors.py
===============================================================================

Componente:
  Errores tipados de Storage de documentos

Responsabilidades:
  - Definir un lenguaje común de fallas del subsistema de almacenamiento.
  - Evitar que OSError/KeyError se filtren a capas superiores.
  - Permitir manejo consistente (NOT_FOUND vs SERVICE_UNAVAILABLE, logs).

Colaboradores:
  - infrastructure/storage/local_file_storage.py
  - infrastructure/storage/in_memory_storage.py
  - application/usecases/extract_prd_test_cases.py
===============================================================================
"""


class StorageError(Exception):
    """Base de errores del subsistema de Storage."""


class StorageConfigurationError(StorageError):
    """Configuración inválida o incompleta del adaptador de storage."""


class StorageNotFoundError(StorageError):
    """Documento no encontrado en el path indicado."""

    def __init__(self, path: str):
        super().__init__(f"Archivo no encontrado en storage. path={path}")
        self.path = path


class StoragePermissionError(StorageError):
    """Path fuera de la raíz permitida o sin permisos de lectura."""

    def __init__(self, message: str = "Permiso denegado en storage."):
        super().__init__(message)


class StorageUnavailableError(StorageError):
    """Storage temporalmente no disponible (I/O error, disco, etc.)."""

    def __init__(self, message: str = "Storage no disponible."):
        super().__init__(message)
