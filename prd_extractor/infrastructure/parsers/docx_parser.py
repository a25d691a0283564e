"""
===============================================================================
ARCHIVO: docx_parser.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    DocxParser

Responsabilidades:
    - Extraer texto crudo desde DOCX usando python-docx.
    - Incluir contenido de párrafos y tablas (los PRD suelen tener tablas).
    - Separar párrafos con línea en blanco (lo usa el fallback de test cases).
    - Reportar warnings no fatales (p.ej. tablas complejas).

Colaboradores:
    - contracts.ParserOptions / ExtractedText
    - errors.DecodeError
    - normalize.truncate_text

Nota .doc:
    - El binario legacy de Word no es un paquete OOXML; python-docx falla al
      abrirlo y eso se propaga como DecodeError. Soporte best-effort: un .doc
      que en realidad es un DOCX renombrado se lee sin problema.
===============================================================================
"""

from __future__ import annotations

from io import BytesIO

from .contracts import BaseParser, ExtractedText, ParserOptions
from .errors import DecodeError
from .file_types import DOCX_SUFFIX
from .normalize import truncate_text

PARAGRAPH_SEPARATOR = "\n\n"


class DocxParser(BaseParser):
    """Estrategia de parsing para documentos Word (python-docx)."""

    def __init__(self, file_type: str = DOCX_SUFFIX) -> None:
        self._file_type = file_type

    def parse(self, content: bytes, *, options: ParserOptions) -> ExtractedText:
        from docx import Document

        try:
            doc = Document(BytesIO(content))
        except Exception as e:
            raise DecodeError(
                f"No se pudo abrir el documento Word ({self._file_type})",
                file_type=self._file_type,
                original_error=e,
            ) from e

        parts: list[str] = []
        warnings: list[str] = []

        # 1) Párrafos (caso común)
        try:
            for p in doc.paragraphs:
                t = (p.text or "").strip()
                if t:
                    parts.append(t)
        except Exception as e:
            raise DecodeError(
                "Fallo al leer párrafos del documento Word",
                file_type=self._file_type,
                original_error=e,
            ) from e

        # 2) Tablas: degradación suave si fallan
        try:
            for table in doc.tables:
                for row in table.rows:
                    for cell in row.cells:
                        for p in cell.paragraphs:
                            t = (p.text or "").strip()
                            if t:
                                parts.append(t)
        except Exception as e:
            warnings.append(
                f"No se pudo extraer completamente el contenido de tablas: {type(e).__name__}"
            )

        raw_text = PARAGRAPH_SEPARATOR.join(parts)
        raw_text, truncated = truncate_text(raw_text, max_chars=options.max_chars)

        return ExtractedText(
            content=raw_text,
            metadata={"source": self._file_type.lstrip(".")},
            warnings=warnings,
            was_truncated=truncated,
        )
