# prd_extractor/crosscutting/logger.py
"""
===============================================================================
MÓDULO: Logs JSON del extractor
===============================================================================

Una línea JSON por evento, en stderr (stdout queda libre para la salida de
la CLI). Los módulos hacen logging.getLogger(__name__) y heredan el handler
de "prd_extractor".

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  JSONFormatter + setup_logger()

Responsabilidades:
  - Serializar el LogRecord y sus campos `extra` (storage_path, phase, count)
  - Ocultar credenciales (p.ej. el token de un generador externo)
  - Nunca volcar el documento: bytes -> tamaño, snippets largos -> recorte

Colaboradores:
  - crosscutting/config.py (log_level, log_json)
  - cli.py (llama setup_logger al arrancar)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Final

LOGGER_NAME: Final[str] = "prd_extractor"

REDACTED: Final[str] = "***REDACTADO***"
MAX_FIELD_CHARS: Final[int] = 2_000
MAX_DEPTH: Final[int] = 4

# Atributos propios de LogRecord: todo lo demás vino por `extra`.
_RECORD_ATTRS: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_SECRET_KEYS: Final[frozenset[str]] = frozenset(
    {
        "password",
        "secret",
        "token",
        "authorization",
        "api_key",
        "apikey",
        "hf_api_token",
        "credential",
    }
)


def _scrub(value: Any, *, key: str | None = None, depth: int = 0) -> Any:
    """Valor apto para JSON, sin secretos ni contenido de documentos."""
    if key is not None and key.lower() in _SECRET_KEYS:
        return REDACTED
    if depth > MAX_DEPTH:
        return "***TRUNCADO***"
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes {len(value)}B>"
    if isinstance(value, str):
        if len(value) > MAX_FIELD_CHARS:
            return f"{value[:MAX_FIELD_CHARS]}...(+{len(value) - MAX_FIELD_CHARS} chars)"
        return value
    if isinstance(value, dict):
        return {str(k): _scrub(v, key=str(k), depth=depth + 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_scrub(v, key=key, depth=depth + 1) for v in value]
    if value is None or isinstance(value, (bool, int, float)):
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """LogRecord -> objeto JSON en una sola línea."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
            "pid": os.getpid(),
        }
        entry.update(
            (k, _scrub(v, key=k))
            for k, v in vars(record).items()
            if k not in _RECORD_ATTRS
        )
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, tb = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "stacktrace": traceback.format_exception(exc_type, exc, tb),
            }
        return json.dumps(entry, ensure_ascii=False, default=str, separators=(",", ":"))


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Configura el logger raíz del paquete según Settings.

    Idempotente: llamarla de nuevo solo ajusta el nivel.
    """
    from .config import get_settings

    settings = get_settings()
    log = logging.getLogger(name)
    log.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        if settings.log_json:
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
            )
        log.addHandler(handler)
    return log
