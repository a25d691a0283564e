"""
===============================================================================
TARJETA CRC - domain/repositories.py
===============================================================================

Módulo:
    Puertos de Persistencia (Protocols)

Responsabilidades:
    - Definir el contrato de persistencia de test cases generados.

Colaboradores:
    - infrastructure/repositories/in_memory: implementación de referencia.
    - application/usecases/extract_prd_test_cases: consumidor.
===============================================================================
"""

from __future__ import annotations

from typing import Protocol

from .entities import ManagedTestCase


class TestCaseRepository(Protocol):
    """Contrato para guardar test cases (batch, upsert por id)."""

    def save_many(self, test_cases: list[ManagedTestCase]) -> None: ...

    def get(self, test_case_id: str) -> ManagedTestCase | None: ...

    def list_by_phase(self, phase: str) -> list[ManagedTestCase]: ...
