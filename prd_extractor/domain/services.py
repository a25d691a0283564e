"""
===============================================================================
TARJETA CRC - domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios (Protocols)

Responsabilidades:
    - Definir contratos para extracción, segmentación, storage y generación.
    - Proteger a application de detalles de librerías (pypdf, openpyxl, ...).
    - Mantener el dominio independiente de SDKs.

Colaboradores:
    - infrastructure/*: implementaciones concretas.
    - application/usecases: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol

from .entities import Phase, TestCaseDraft


class DocumentTextExtractor(Protocol):
    """Contrato para extraer texto desde documentos binarios."""

    def extract_text(self, content: bytes, filename: str) -> str: ...


class PhaseDetector(Protocol):
    """Contrato para partir texto en fases etiquetadas."""

    def detect(self, text: str) -> list[Phase]: ...


class DocumentStoragePort(Protocol):
    """
    Contrato de storage de documentos subidos.

    download() lanza StorageNotFoundError si el path no existe.
    """

    def download(self, path: str) -> bytes: ...


class TestCaseGenerator(Protocol):
    """
    Contrato para generar borradores de test cases desde un snippet.

    Puede fallar (red, auth, parseo); el caso de uso aplica el fallback.
    """

    def generate(self, snippet: str) -> list[TestCaseDraft]: ...
