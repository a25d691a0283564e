"""
===============================================================================
CRC CARD - infrastructure/text/phase_segmenter.py
===============================================================================

Componente:
  Segmentación heurística de PRDs en fases

Responsabilidades:
  - Partir texto plano en secciones ("fases") detectando líneas encabezado.
  - Acotar nombres (50 chars + "...") y snippets (25_000 chars).
  - Exponer:
      * detect_phases(text) -> list[Phase] (función pura, nunca falla)
      * truncate_phase_name(name) (idempotente)
      * RegexPhaseDetector (servicio para DI)

Colaboradores:
  - domain/entities.Phase
  - infrastructure/parsers/normalize.truncate_text

Reglas del algoritmo:
  1. Se separa por \\n o \\r\\n, se hace strip() y se descartan líneas vacías.
  2. Un encabezado cierra la fase anterior solo si acumuló contenido. Como
     el encabezado ya está en el buffer, dos encabezados seguidos dan dos
     fases (la primera solo con su línea).
  3. Dígitos y espacios del encabezado son solo ASCII.
  4. La línea encabezado es contenido de la fase que abre.
  5. Sin fases y texto ORIGINAL no vacío -> una fase "Initial" con el texto
     completo (aunque sea solo whitespace).
===============================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from ...domain.entities import Phase
from ..parsers.normalize import truncate_text

INITIAL_PHASE_NAME: Final[str] = "Initial"
DEFAULT_MAX_NAME_CHARS: Final[int] = 50
DEFAULT_MAX_SNIPPET_CHARS: Final[int] = 25_000
NAME_ELLIPSIS: Final[str] = "..."

PHASE_HEADER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(Phase\s*\d+|Phase\s*:|Phases|Detailed Flow|Chapter\s+\d+)",
    re.IGNORECASE | re.ASCII,
)

_LINE_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


def is_phase_header(line: str) -> bool:
    """True si la línea (ya recortada) abre una nueva fase."""
    return PHASE_HEADER_RE.match(line) is not None


def truncate_phase_name(name: str, max_chars: int = DEFAULT_MAX_NAME_CHARS) -> str:
    """
    Acota el nombre de fase a max_chars + "...".

    Idempotente: aplicarla sobre su propia salida no cambia nada, porque los
    primeros max_chars de un nombre ya truncado son los mismos.
    """
    if len(name) <= max_chars:
        return name
    return name[:max_chars] + NAME_ELLIPSIS


@dataclass
class _SegmenterState:
    """Estado explícito del recorrido: nombre actual, buffer de líneas, fases."""

    current_name: str = INITIAL_PHASE_NAME
    buffer: list[str] = field(default_factory=list)
    phases: list[Phase] = field(default_factory=list)

    def flush(self) -> None:
        if self.buffer:
            self.phases.append(
                Phase(name=self.current_name, snippet="\n".join(self.buffer))
            )
        self.buffer = []

    def feed(self, line: str, *, max_name_chars: int) -> None:
        if is_phase_header(line):
            self.flush()
            self.current_name = truncate_phase_name(line, max_name_chars)
        self.buffer.append(line)


def detect_phases(
    text: str,
    *,
    max_snippet_chars: int = DEFAULT_MAX_SNIPPET_CHARS,
    max_name_chars: int = DEFAULT_MAX_NAME_CHARS,
) -> list[Phase]:
    """
    Parte el texto en fases ordenadas según aparición.

    Nunca lanza: "" -> [].
    """
    if not text:
        return []

    state = _SegmenterState()
    for raw_line in _LINE_SPLIT_RE.split(text):
        line = raw_line.strip()
        if line:
            state.feed(line, max_name_chars=max_name_chars)
    state.flush()

    phases = state.phases
    if not phases:
        # Chequeo sobre el texto original (pre-filtro): whitespace puro cuenta.
        phases = [Phase(name=INITIAL_PHASE_NAME, snippet=text)]

    return [
        Phase(
            name=phase.name or f"Phase {index}",
            snippet=truncate_text(phase.snippet, max_chars=max_snippet_chars)[0],
        )
        for index, phase in enumerate(phases, start=1)
    ]


class RegexPhaseDetector:
    """Servicio inyectable (PhaseDetector) con límites configurables."""

    def __init__(
        self,
        *,
        max_snippet_chars: int = DEFAULT_MAX_SNIPPET_CHARS,
        max_name_chars: int = DEFAULT_MAX_NAME_CHARS,
    ) -> None:
        if max_snippet_chars <= 0:
            raise ValueError(f"max_snippet_chars debe ser > 0. got={max_snippet_chars}")
        if max_name_chars <= 0:
            raise ValueError(f"max_name_chars debe ser > 0. got={max_name_chars}")
        self._max_snippet_chars = max_snippet_chars
        self._max_name_chars = max_name_chars

    def detect(self, text: str) -> list[Phase]:
        return detect_phases(
            text,
            max_snippet_chars=self._max_snippet_chars,
            max_name_chars=self._max_name_chars,
        )
