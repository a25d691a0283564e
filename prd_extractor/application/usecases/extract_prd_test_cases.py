"""
===============================================================================
USE CASE: Extract PRD Test Cases
===============================================================================

Name:
    Extract PRD Test Cases Use Case

Business Goal:
    A partir de un PRD subido a storage:
      - descargar el archivo
      - extraer texto plano
      - segmentar en fases
      - pedir al usuario que elija fase si hay más de una
      - generar test cases para la fase elegida (con fallback determinístico)
      - persistir los test cases resultantes

Why (Context / Intención):
    - Los PRD grandes no caben enteros en un generador: se trabaja sobre una
      fase acotada.
    - El generador externo puede fallar (red, auth, parseo); el flujo nunca
      queda sin resultado gracias al fallback por párrafos.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ExtractPrdTestCasesUseCase

Responsibilities:
    - Validar input mínimo (storage_path, repo_id).
    - Descargar y mapear "no existe" a NOT_FOUND.
    - Extraer texto y mapear fallas de decodificación a UNPROCESSABLE.
    - Decidir need_phase / seleccionar snippet.
    - Invocar generador (snippet acotado) y caer en fallback si falla.
    - Mapear borradores a ManagedTestCase con defaults y persistir en batch.

Collaborators:
    - DocumentStoragePort.download(path) -> bytes
    - DocumentTextExtractor.extract_text(content, filename) -> str
    - PhaseDetector.detect(text) -> list[Phase]
    - TestCaseGenerator.generate(snippet) -> list[TestCaseDraft]
    - TestCaseRepository.save_many(test_cases)
===============================================================================
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final
from uuid import uuid4

from ...domain.entities import ManagedTestCase, Phase, TestCaseDraft
from ...domain.repositories import TestCaseRepository
from ...domain.services import (
    DocumentStoragePort,
    DocumentTextExtractor,
    PhaseDetector,
    TestCaseGenerator,
)
from ...infrastructure.parsers.errors import ParserError
from ...infrastructure.storage.errors import StorageError, StorageNotFoundError
from .results import ExtractionError, ExtractionErrorCode, ExtractPrdTestCasesResult

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constantes: evitan magic numbers/strings dispersos.
# -----------------------------------------------------------------------------
DEFAULT_MAX_GENERATOR_CHARS: Final[int] = 30_000
DEFAULT_PHASE_NAME: Final[str] = "Initial"

DEFAULT_TITLE: Final[str] = "Untitled Test Case"
DEFAULT_PRIORITY: Final[str] = "Medium"
DEFAULT_STATUS: Final[str] = "Not Run"
DEFAULT_PRECONDITIONS: Final[str] = "N/A"
DEFAULT_EXPECTED_RESULT: Final[str] = "TBD"
DEFAULT_UPDATED_BY: Final[str] = "PRD-Extractor"
GENERATED_BY_UID: Final[str] = "AI_GENERATED"
SOURCE_PRD: Final[str] = "PRD"

_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class ExtractPrdTestCasesInput:
    """
    DTO de entrada.

    Campos:
      - storage_path: path del archivo en storage (también da la extensión).
      - repo_id: repositorio de test cases destino.
      - phase: nombre de fase elegido (opcional).
      - user_email: autor registrado en los test cases (opcional).
    """

    storage_path: str
    repo_id: str
    phase: str | None = None
    user_email: str | None = None


def _error(
    code: ExtractionErrorCode, message: str, resource: str | None = None
) -> ExtractPrdTestCasesResult:
    return ExtractPrdTestCasesResult(
        error=ExtractionError(code=code, message=message, resource=resource)
    )


def select_phase(
    phases: list[Phase], text: str, requested: str | None
) -> tuple[str, str]:
    """
    Devuelve (snippet, nombre_de_fase).

    Reglas:
      - Sin fases: texto completo, "Initial".
      - Con fase pedida: la primera con ese nombre exacto; si no existe,
        texto completo e "Initial".
      - Sin fase pedida: la primera fase.
    """
    if not phases:
        return text, DEFAULT_PHASE_NAME

    if requested:
        for phase in phases:
            if phase.name == requested:
                return phase.snippet, phase.name
        return text, DEFAULT_PHASE_NAME

    return phases[0].snippet, phases[0].name


def managed_test_case_id(draft: TestCaseDraft) -> str:
    """id alfanumérico derivado del borrador, o uuid4 hex si no hay uno usable."""
    if draft.id:
        cleaned = _NON_ALNUM_RE.sub("", draft.id)
        if cleaned:
            return cleaned
    return uuid4().hex


class ExtractPrdTestCasesUseCase:
    """
    Use Case (Application Service / Command):
        Convierte un PRD almacenado en test cases persistidos.
    """

    def __init__(
        self,
        storage: DocumentStoragePort,
        extractor: DocumentTextExtractor,
        phase_detector: PhaseDetector,
        repository: TestCaseRepository,
        fallback_generator: TestCaseGenerator,
        generator: TestCaseGenerator | None = None,
        *,
        max_generator_chars: int = DEFAULT_MAX_GENERATOR_CHARS,
    ) -> None:
        self._storage = storage
        self._extractor = extractor
        self._phases = phase_detector
        self._repository = repository
        self._fallback = fallback_generator
        self._generator = generator
        self._max_generator_chars = max_generator_chars

    def execute(self, input_data: ExtractPrdTestCasesInput) -> ExtractPrdTestCasesResult:
        # ---------------------------------------------------------------------
        # 1) Validación mínima.
        # ---------------------------------------------------------------------
        if not input_data.storage_path:
            return _error(ExtractionErrorCode.VALIDATION_ERROR, "storagePath required")
        if not input_data.repo_id:
            return _error(ExtractionErrorCode.VALIDATION_ERROR, "repoId required")

        storage_path = input_data.storage_path

        # ---------------------------------------------------------------------
        # 2) Descargar documento.
        # ---------------------------------------------------------------------
        try:
            content = self._storage.download(storage_path)
        except StorageNotFoundError:
            logger.warning(
                "Extract PRD: file not found", extra={"storage_path": storage_path}
            )
            return _error(
                ExtractionErrorCode.NOT_FOUND,
                "File not found in storage.",
                resource="Document",
            )
        except StorageError as exc:
            logger.error(
                "Extract PRD: storage unavailable",
                extra={"storage_path": storage_path, "error": str(exc)},
            )
            return _error(
                ExtractionErrorCode.SERVICE_UNAVAILABLE, str(exc), resource="Storage"
            )

        # ---------------------------------------------------------------------
        # 3) Texto + fases.
        # ---------------------------------------------------------------------
        try:
            text = self._extractor.extract_text(content, storage_path)
        except ParserError as exc:
            logger.warning(
                "Extract PRD: document could not be decoded",
                extra={"storage_path": storage_path, "code": exc.code},
            )
            return _error(
                ExtractionErrorCode.UNPROCESSABLE, str(exc), resource="Document"
            )

        phases = self._phases.detect(text)

        # ---------------------------------------------------------------------
        # 4) Más de una fase y ninguna elegida: devolver opciones.
        # ---------------------------------------------------------------------
        if not input_data.phase and len(phases) > 1:
            return ExtractPrdTestCasesResult(
                need_phase=True,
                phases=[phase.name for phase in phases],
                storage_path=storage_path,
            )

        snippet, phase_name = select_phase(phases, text, input_data.phase)

        # ---------------------------------------------------------------------
        # 5) Generación con fallback.
        # ---------------------------------------------------------------------
        drafts, used_fallback = self._generate(snippet, storage_path=storage_path)

        test_cases = [
            self._to_managed(
                draft,
                phase_name=phase_name,
                repo_id=input_data.repo_id,
                user_email=input_data.user_email,
            )
            for draft in drafts
        ]

        # ---------------------------------------------------------------------
        # 6) Persistencia batch.
        # ---------------------------------------------------------------------
        try:
            self._repository.save_many(test_cases)
        except Exception as exc:
            logger.exception(
                "Extract PRD: saving test cases failed",
                extra={"storage_path": storage_path},
            )
            return _error(
                ExtractionErrorCode.SERVICE_UNAVAILABLE, str(exc), resource="TestCase"
            )

        logger.info(
            "Extract PRD: test cases created",
            extra={
                "storage_path": storage_path,
                "phase": phase_name,
                "count": len(test_cases),
                "used_fallback": used_fallback,
            },
        )

        return ExtractPrdTestCasesResult(
            test_cases=test_cases,
            storage_path=storage_path,
            selected_phase=phase_name,
            used_fallback=used_fallback,
        )

    # =========================================================================
    # Helpers privados
    # =========================================================================

    def _generate(
        self, snippet: str, *, storage_path: str
    ) -> tuple[list[TestCaseDraft], bool]:
        if self._generator is not None:
            try:
                return (
                    list(self._generator.generate(snippet[: self._max_generator_chars])),
                    False,
                )
            except Exception:
                logger.exception(
                    "Extract PRD: generator failed, using fallback",
                    extra={"storage_path": storage_path},
                )

        return list(self._fallback.generate(snippet)), True

    @staticmethod
    def _to_managed(
        draft: TestCaseDraft,
        *,
        phase_name: str,
        repo_id: str,
        user_email: str | None,
    ) -> ManagedTestCase:
        return ManagedTestCase(
            id=managed_test_case_id(draft),
            title=draft.title or DEFAULT_TITLE,
            module=draft.module or phase_name,
            priority=draft.priority or DEFAULT_PRIORITY,
            status=DEFAULT_STATUS,
            preconditions=draft.preconditions or DEFAULT_PRECONDITIONS,
            test_steps=list(draft.steps or []),
            expected_result=draft.expected_result or DEFAULT_EXPECTED_RESULT,
            last_updated_by=user_email or DEFAULT_UPDATED_BY,
            last_updated_by_uid=GENERATED_BY_UID,
            source=SOURCE_PRD,
            phase=phase_name,
            repo_id=repo_id,
        )
