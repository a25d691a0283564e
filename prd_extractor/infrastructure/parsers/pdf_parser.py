"""
===============================================================================
ARCHIVO: pdf_parser.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    PdfParser

Responsabilidades:
    - Extraer el texto de las páginas de un PDF usando pypdf.
    - Ser tolerante a fallos parciales (una página rota no tumba todo).
    - Respetar max_pages si está configurado.
    - Emitir warnings útiles.

Colaboradores:
    - contracts.ParserOptions / ExtractedText
    - errors.DecodeError
    - normalize.truncate_text
===============================================================================
"""

from __future__ import annotations

from io import BytesIO

from .contracts import BaseParser, ExtractedText, ParserOptions
from .errors import DecodeError
from .file_types import PDF_SUFFIX
from .normalize import truncate_text


class PdfParser(BaseParser):
    """Estrategia de parsing para PDFs (pypdf)."""

    def parse(self, content: bytes, *, options: ParserOptions) -> ExtractedText:
        # Lazy import: solo se paga si llega un PDF
        from pypdf import PdfReader

        # strict=False reduce fallos por PDFs imperfectos
        try:
            reader = PdfReader(BytesIO(content), strict=False)
            pages = list(reader.pages)
        except Exception as e:
            raise DecodeError(
                "No se pudo abrir el PDF (archivo corrupto o inválido)",
                file_type=PDF_SUFFIX,
                original_error=e,
            ) from e

        warnings: list[str] = []
        max_pages = (
            options.max_pages if (options.max_pages and options.max_pages > 0) else None
        )

        extracted_parts: list[str] = []
        truncated_by_pages = False

        for i, page in enumerate(pages):
            if max_pages is not None and i >= max_pages:
                truncated_by_pages = True
                warnings.append(f"PDF truncado por max_pages={max_pages}")
                break

            try:
                text = page.extract_text() or ""
            except Exception as e:
                warnings.append(
                    f"Fallo al extraer texto de página {i}: {type(e).__name__}"
                )
                continue

            if text:
                extracted_parts.append(text)

        raw_text = "\n".join(extracted_parts)
        raw_text, truncated_by_chars = truncate_text(
            raw_text, max_chars=options.max_chars
        )

        return ExtractedText(
            content=raw_text,
            metadata={"source": "pdf"},
            warnings=warnings,
            page_count=len(pages),
            was_truncated=truncated_by_pages or truncated_by_chars,
        )
