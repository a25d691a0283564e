"""
===============================================================================
TARJETA CRC - domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Phase, TestCaseDraft, ManagedTestCase)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Brindar helpers mínimos para construir entidades desde datos crudos.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - infrastructure/text/phase_segmenter: produce Phase.
    - domain.services.TestCaseGenerator: produce TestCaseDraft.
    - application/usecases: mapea TestCaseDraft -> ManagedTestCase.
    - domain.repositories: persiste ManagedTestCase.

Principios:
    - Sin dependencias a storage/SDKs/CLI.
    - Datos + comportamiento mínimo.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Phase
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Phase:
    """
    Sección detectada heurísticamente en un documento.

    Importante:
      - name nunca vacío; no es único (los encabezados pueden repetirse).
      - snippet acotado por el segmentador (por defecto 25_000 chars).
    """

    name: str
    snippet: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "snippet": self.snippet}


# ---------------------------------------------------------------------------
# Test cases
# ---------------------------------------------------------------------------


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass(frozen=True)
class TestCaseDraft:
    """
    Borrador de caso de prueba devuelto por un generador.

    Todos los campos son opcionales: el caso de uso completa defaults al
    convertirlo en ManagedTestCase.
    """

    __test__ = False  # evita que pytest intente recolectarla

    id: Optional[str] = None
    title: Optional[str] = None
    module: Optional[str] = None
    priority: Optional[str] = None
    preconditions: Optional[str] = None
    steps: List[str] = field(default_factory=list)
    expected_result: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TestCaseDraft":
        """
        Construye un borrador desde un registro JSON crudo.

        Acepta `expected_result` o `expectedResult` (formato de los modelos).
        `steps` puede venir como lista o como string único.
        """
        raw_steps = data.get("steps") or data.get("testSteps") or []
        if isinstance(raw_steps, str):
            steps = [raw_steps]
        else:
            steps = [str(step) for step in raw_steps]

        expected = data.get("expected_result", data.get("expectedResult"))

        return cls(
            id=_optional_str(data.get("id")),
            title=_optional_str(data.get("title")),
            module=_optional_str(data.get("module")),
            priority=_optional_str(data.get("priority")),
            preconditions=_optional_str(data.get("preconditions")),
            steps=steps,
            expected_result=_optional_str(expected),
        )


@dataclass
class ManagedTestCase:
    """
    Caso de prueba persistido en el repositorio de test cases.

    Notas:
      - `phase` es la fase del PRD de la que se originó.
      - `source` identifica el origen ("PRD").
    """

    id: str
    title: str
    module: str
    priority: str
    status: str
    preconditions: str
    test_steps: List[str]
    expected_result: str
    last_updated_by: str
    last_updated_by_uid: str
    source: str
    phase: str
    repo_id: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "module": self.module,
            "priority": self.priority,
            "status": self.status,
            "preconditions": self.preconditions,
            "testSteps": list(self.test_steps),
            "expectedResult": self.expected_result,
            "lastUpdatedBy": self.last_updated_by,
            "lastUpdatedByUid": self.last_updated_by_uid,
            "source": self.source,
            "phase": self.phase,
            "repoId": self.repo_id,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
