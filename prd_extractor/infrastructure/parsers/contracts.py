"""
===============================================================================
ARCHIVO: contracts.py
===============================================================================

CRC CARD (Module)
-------------------------------------------------------------------------------
Nombre:
    Tipos compartidos por los decoders de documentos

Responsabilidades:
    - ParserOptions: perillas comunes (páginas, caracteres, encoding).
    - ExtractedText: texto decodificado + warnings + conteo de páginas/hojas.
    - BaseParser: la Strategy que implementa cada formato.

Colaboradores:
    - PdfParser / DocxParser / SpreadsheetParser / TextParser
    - registry.ParserRegistry (elige la Strategy por sufijo)
    - document_text_extractor.SimpleDocumentTextExtractor
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class ParserOptions:
    """
    Perillas de extracción.

      - max_pages: solo PDF; None lee todas las páginas.
      - max_chars: recorte final del texto; None no recorta.
      - normalize_whitespace: apagado para que el segmentador reciba las
        líneas del documento sin tocar.
      - encoding / strict_encoding: decodificación de texto plano. En modo no
        estricto un byte inválido se vuelve U+FFFD.
    """

    max_pages: int | None = None
    max_chars: int | None = None
    normalize_whitespace: bool = False
    encoding: str = "utf-8"
    strict_encoding: bool = False


@dataclass(frozen=True)
class ExtractedText:
    """Salida de un decoder. `content` es lo único que ve el dominio."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    page_count: int | None = None  # páginas (PDF) u hojas (planillas)
    was_truncated: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()


@runtime_checkable
class BaseParser(Protocol):
    """Decoder de un formato: bytes -> ExtractedText."""

    def parse(self, content: bytes, *, options: ParserOptions) -> ExtractedText:
        """Lanza DecodeError, o EncodingError con strict_encoding=True."""
        ...
