"""
===============================================================================
CRC CARD - infrastructure/services/paragraph_test_case_generator.py
===============================================================================

Clase:
  ParagraphTestCaseGenerator (TestCaseGenerator determinístico)

Responsabilidades:
  - Generar borradores de test cases sin servicios externos.
  - Usarse como fallback cuando el generador principal falla.

Reglas:
  - Párrafos = bloques separados por 2+ saltos de línea, strip, sin vacíos.
  - Solo los primeros max_test_cases párrafos (default 10).
  - id "TC_001", "TC_002", ...
  - título = primera oración (hasta el primer ".") recortada a 80 chars;
    si queda vacía: "Review feature: {índice 0-based}".
  - un único paso con los primeros 200 chars del párrafo.

Colaboradores:
  - domain.entities.TestCaseDraft
  - application/usecases/extract_prd_test_cases (fallback)
===============================================================================
"""

from __future__ import annotations

import re
from typing import Final

from ...domain.entities import TestCaseDraft

DEFAULT_MAX_TEST_CASES: Final[int] = 10
MAX_TITLE_CHARS: Final[int] = 80
MAX_STEP_CHARS: Final[int] = 200

_PARAGRAPH_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> list[str]:
    """Bloques separados por líneas en blanco, sin vacíos."""
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text or "") if p.strip()]


class ParagraphTestCaseGenerator:
    """Fallback determinístico: un test case por párrafo."""

    def __init__(self, max_test_cases: int = DEFAULT_MAX_TEST_CASES) -> None:
        if max_test_cases <= 0:
            raise ValueError(f"max_test_cases debe ser > 0. got={max_test_cases}")
        self._max_test_cases = max_test_cases

    def generate(self, snippet: str) -> list[TestCaseDraft]:
        paragraphs = split_paragraphs(snippet)[: self._max_test_cases]
        return [
            TestCaseDraft(
                id=f"TC_{idx + 1:03d}",
                title=paragraph.split(".")[0][:MAX_TITLE_CHARS]
                or f"Review feature: {idx}",
                steps=[paragraph[:MAX_STEP_CHARS]],
            )
            for idx, paragraph in enumerate(paragraphs)
        ]
