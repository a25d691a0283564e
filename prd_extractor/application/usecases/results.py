"""
===============================================================================
EXTRACTION USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Extraction Use Case Results

Business Goal:
    Proveer tipos consistentes de resultados y errores para el flujo
    PRD -> texto -> fases -> test cases.

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de propagar excepciones.
    - Facilita:
        * mapeo uniforme a exit codes / respuestas
        * testeo de flujos por resultado (sin mocks de I/O)

-------------------------------------------------------------------------------
CRC CARD (Module-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    results models (module)

Responsibilities:
    - Definir ExtractionErrorCode como conjunto estable de categorías de error.
    - Definir ExtractionError como contrato mínimo de error.
    - Definir ExtractPrdTestCasesResult.

Collaborators:
    - domain.entities: ManagedTestCase
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ...domain.entities import ManagedTestCase


class ExtractionErrorCode(str, Enum):
    """
    Categorías de error del flujo de extracción.

    Códigos:
      - VALIDATION_ERROR: input inválido/incompleto.
      - NOT_FOUND: el documento no existe en storage.
      - UNPROCESSABLE: el documento no se pudo decodificar.
      - SERVICE_UNAVAILABLE: storage o repositorio caído.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNPROCESSABLE = "UNPROCESSABLE"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


@dataclass(frozen=True)
class ExtractionError:
    """
    Error de caso de uso.

    Campos:
      - code: ExtractionErrorCode (categoría estable)
      - message: mensaje humano (CLI/logs)
      - resource: recurso afectado (opcional), ej. "Document"
    """

    code: ExtractionErrorCode
    message: str
    resource: str | None = None


@dataclass
class ExtractPrdTestCasesResult:
    """
    Resultado de extraer test cases desde un PRD.

    Contrato:
      - Error: error != None, resto vacío.
      - Se necesita elegir fase: need_phase=True, phases con los nombres.
      - Éxito: test_cases persistidos, selected_phase con la fase usada.
    """

    test_cases: List[ManagedTestCase] = field(default_factory=list)
    need_phase: bool = False
    phases: List[str] = field(default_factory=list)
    storage_path: str | None = None
    selected_phase: str | None = None
    used_fallback: bool = False
    error: ExtractionError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and not self.need_phase

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"error": self.error.message, "code": self.error.code.value}
        if self.need_phase:
            return {
                "needPhase": True,
                "phases": list(self.phases),
                "storagePath": self.storage_path,
            }
        return {
            "success": True,
            "phase": self.selected_phase,
            "usedFallback": self.used_fallback,
            "testcases": [tc.to_dict() for tc in self.test_cases],
        }
