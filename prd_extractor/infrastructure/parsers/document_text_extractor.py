"""
===============================================================================
ARCHIVO: document_text_extractor.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    SimpleDocumentTextExtractor (Adapter)

Responsabilidades:
    - Adaptar el sub-sistema de parsers al contrato del dominio (DocumentTextExtractor).
    - Elegir Strategy correcta mediante ParserRegistry (por sufijo).
    - Aplicar opciones globales (ParserOptions) de forma consistente.
    - Retornar solo str, descartando metadata.

Colaboradores:
    - domain.services.DocumentTextExtractor (contrato)
    - registry.ParserRegistry
    - contracts.ParserOptions
    - normalize.normalize_text / truncate_text
===============================================================================
"""

from __future__ import annotations

from ...domain.services import DocumentTextExtractor
from .contracts import ExtractedText, ParserOptions
from .normalize import normalize_text, truncate_text
from .registry import ParserRegistry


class SimpleDocumentTextExtractor(DocumentTextExtractor):
    """
    Implementación concreta del servicio del dominio, respaldada por ParserRegistry.

    Sin estado mutable: seguro para usar desde varios hilos a la vez.
    """

    def __init__(
        self,
        registry: ParserRegistry | None = None,
        options: ParserOptions | None = None,
    ) -> None:
        self._registry = registry or ParserRegistry()
        self._options = options or ParserOptions()

    def extract(self, content: bytes, filename: str) -> ExtractedText:
        """Extrae texto + metadatos (warnings, páginas, truncado)."""
        parser = self._registry.get_parser(filename)
        return parser.parse(content, options=self._options)

    def extract_text(self, content: bytes, filename: str) -> str:
        """
        Extrae texto desde bytes usando la Strategy adecuada.

        Errores:
          - DecodeError si el decoder del formato falla (sin reintentos).
          - EncodingError solo con strict_encoding=True.
        """
        text = self.extract(content, filename).content

        if self._options.normalize_whitespace:
            text = normalize_text(text, collapse_whitespace=True)
            text, _ = truncate_text(text, max_chars=self._options.max_chars)

        return text


_default_extractor = SimpleDocumentTextExtractor()


def extract_text(buffer: bytes, filename: str) -> str:
    """Atajo funcional con opciones por defecto: bytes + filename -> texto."""
    return _default_extractor.extract_text(buffer, filename)
