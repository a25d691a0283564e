"""
prd_extractor

Extracción de texto de documentos PRD, segmentación heurística en fases y
borradores de casos de prueba a partir de la fase elegida.

API pública mínima:

    from prd_extractor import extract_text, detect_phases

    text = extract_text(buffer, "requirements.docx")
    phases = detect_phases(text)
"""

from .domain.entities import Phase
from .infrastructure.parsers import extract_text
from .infrastructure.text import detect_phases

__all__ = ["Phase", "extract_text", "detect_phases"]
