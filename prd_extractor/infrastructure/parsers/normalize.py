"""
===============================================================================
ARCHIVO: normalize.py
===============================================================================

CRC CARD (Module)
-------------------------------------------------------------------------------
Nombre:
    Normalización y Truncado de Texto

Responsabilidades:
    - Normalizar texto extraído (opt-in vía ParserOptions.normalize_whitespace).
    - Aplicar truncado por caracteres (extractor con max_chars, snippets de fase).

Colaboradores:
    - document_text_extractor.SimpleDocumentTextExtractor
    - pdf_parser.PdfParser
    - infrastructure/text/phase_segmenter (tope de snippets)
===============================================================================
"""

from __future__ import annotations

import re

_NULL_CHAR = "\x00"
_HORIZONTAL_WS_RE = re.compile(r"[ \t]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str | None, *, collapse_whitespace: bool) -> str:
    """
    Normaliza texto para consumo estable.

    Qué hace:
      - Elimina caracteres NULL (PDFs mal generados).
      - strip() para quitar extremos.
      - Opcionalmente colapsa whitespace excesivo.

    Nota:
      - Mantiene hasta dos saltos de línea seguidos: el fallback de test
        cases separa párrafos por líneas en blanco.
    """
    if not text:
        return ""

    text = text.replace(_NULL_CHAR, "").strip()

    if collapse_whitespace:
        text = _HORIZONTAL_WS_RE.sub(" ", text)
        text = _BLANK_RUN_RE.sub("\n\n", text)

    return text


def truncate_text(text: str, *, max_chars: int | None) -> tuple[str, bool]:
    """
    Trunca texto según max_chars y devuelve (texto, was_truncated).

    Nota:
      - max_chars=None o <=0 => no trunca.
    """
    if max_chars is None or max_chars <= 0:
        return text, False
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True
