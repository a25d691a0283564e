"""
===============================================================================
ARCHIVO: registry.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    ParserRegistry

Responsabilidades:
    - Mantener el mapeo sufijo -> Strategy (parser).
    - Resolver parser por nombre de archivo (con normalización).
    - Caer en TextParser cuando el sufijo no tiene decoder dedicado.
    - Permitir sustituir decoders sin modificar consumidores vía register().

Colaboradores:
    - file_types.normalize_suffix / SUPPORTED_SUFFIXES
    - errors.EncodingError
    - PdfParser / DocxParser / SpreadsheetParser / TextParser
===============================================================================
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from .contracts import BaseParser, ExtractedText, ParserOptions
from .docx_parser import DocxParser
from .errors import EncodingError
from .file_types import (
    CSV_SUFFIX,
    DOC_SUFFIX,
    DOCX_SUFFIX,
    PDF_SUFFIX,
    XLS_SUFFIX,
    XLSX_SUFFIX,
    normalize_registered_suffix,
    normalize_suffix,
)
from .normalize import truncate_text
from .pdf_parser import PdfParser
from .spreadsheet_parser import SpreadsheetParser


class TextParser(BaseParser):
    """
    Parser para texto plano (rama por defecto del registry).

    Nota:
      - Por defecto reemplaza bytes inválidos por U+FFFD y nunca falla.
      - Con strict_encoding=True lanza EncodingError.
    """

    def parse(self, content: bytes, *, options: ParserOptions) -> ExtractedText:
        warnings: list[str] = []
        try:
            text = content.decode(options.encoding)
        except UnicodeDecodeError as e:
            if options.strict_encoding:
                raise EncodingError(options.encoding, original_error=e) from e
            text = content.decode(options.encoding, errors="replace")
            warnings.append(
                f"Bytes inválidos para {options.encoding} reemplazados por U+FFFD"
            )

        text, truncated = truncate_text(text, max_chars=options.max_chars)
        return ExtractedText(
            content=text,
            metadata={"source": "text"},
            warnings=warnings,
            was_truncated=truncated,
        )


ParserFactory = Callable[[], BaseParser]


class ParserRegistry:
    """Registry/Factory de parsers por sufijo de archivo."""

    def __init__(self, default_factory: ParserFactory = TextParser) -> None:
        # Factories (callables): instanciación tardía y tests más simples
        self._default_factory = default_factory
        self._factories: dict[str, ParserFactory] = {
            PDF_SUFFIX: PdfParser,
            DOCX_SUFFIX: partial(DocxParser, file_type=DOCX_SUFFIX),
            DOC_SUFFIX: partial(DocxParser, file_type=DOC_SUFFIX),
            XLSX_SUFFIX: partial(SpreadsheetParser, file_type=XLSX_SUFFIX),
            XLS_SUFFIX: partial(SpreadsheetParser, file_type=XLS_SUFFIX),
            CSV_SUFFIX: partial(SpreadsheetParser, file_type=CSV_SUFFIX),
        }

    def registered_suffixes(self) -> frozenset[str]:
        """Sufijos con decoder dedicado (el resto va a texto plano)."""
        return frozenset(self._factories)

    def register(self, suffix: str, factory: ParserFactory) -> None:
        """
        Registrar/override de un parser.

        Ejemplo:
          registry.register(".md", MarkdownParser)
        """
        normalized = normalize_registered_suffix(suffix)
        if not normalized:
            raise ValueError("suffix es requerido")
        self._factories[normalized] = factory

    def get_parser(self, filename: str) -> BaseParser:
        """Retorna un parser instanciado para el archivo (default: TextParser)."""
        factory = self._factories.get(normalize_suffix(filename), self._default_factory)
        return factory()
