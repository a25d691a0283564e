"""
===============================================================================
ARCHIVO: file_types.py
===============================================================================

CRC CARD (Module)
-------------------------------------------------------------------------------
Nombre:
    Tipos de archivo y Normalización de sufijos

Responsabilidades:
    - Definir constantes de sufijos soportados por decoders dedicados.
    - Proveer una normalización segura del sufijo (evita drift y edge cases).

Colaboradores:
    - registry.ParserRegistry
    - spreadsheet_parser.SpreadsheetParser (elige motor por sufijo)
===============================================================================
"""

from __future__ import annotations

PDF_SUFFIX: str = ".pdf"
DOCX_SUFFIX: str = ".docx"
DOC_SUFFIX: str = ".doc"
XLSX_SUFFIX: str = ".xlsx"
XLS_SUFFIX: str = ".xls"
CSV_SUFFIX: str = ".csv"

WORD_SUFFIXES = frozenset({DOCX_SUFFIX, DOC_SUFFIX})
SPREADSHEET_SUFFIXES = frozenset({XLSX_SUFFIX, XLS_SUFFIX, CSV_SUFFIX})

# Todo lo demás se decodifica como texto plano.
SUPPORTED_SUFFIXES = frozenset({PDF_SUFFIX}) | WORD_SUFFIXES | SPREADSHEET_SUFFIXES


def normalize_suffix(filename: str) -> str:
    """
    Devuelve el sufijo normalizado de un nombre de archivo o storage path.

    Regla:
      - lower()
      - último segmento del path ("uploads/a.b/PRD.PDF" -> ".pdf")
      - sin punto -> "" (cae en texto plano)
    """
    if not filename:
        return ""
    name = filename.lower().replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[1]


def normalize_registered_suffix(suffix: str) -> str:
    """Normaliza un sufijo suelto para registry.register() (".XLSX"/"xlsx" -> ".xlsx")."""
    value = (suffix or "").strip().lower()
    if not value:
        return ""
    return value if value.startswith(".") else f".{value}"
