"""
===============================================================================
TARJETA CRC - prd_extractor/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (storage, extractor, segmentador, repositorio,
    generadores) siguiendo DIP.
  - Exponer factories para la CLI y para integraciones.
  - Mantener singletons con caching (lru_cache).
  - Centralizar decisiones runtime basadas en Settings (config).

Colaboradores:
  - prd_extractor.crosscutting.config.get_settings
  - prd_extractor.domain.* (puertos)
  - prd_extractor.infrastructure.* (implementaciones)
  - prd_extractor.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import ExtractPrdTestCasesUseCase
from .crosscutting.config import get_settings
from .domain.repositories import TestCaseRepository
from .domain.services import (
    DocumentStoragePort,
    DocumentTextExtractor,
    PhaseDetector,
    TestCaseGenerator,
)
from .infrastructure.parsers import ParserOptions, SimpleDocumentTextExtractor
from .infrastructure.repositories import InMemoryTestCaseRepository
from .infrastructure.services import ParagraphTestCaseGenerator
from .infrastructure.storage import LocalFileStorage
from .infrastructure.text import RegexPhaseDetector

# =============================================================================
# Servicios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_parser_options() -> ParserOptions:
    """Opciones de parsing derivadas de Settings."""
    settings = get_settings()
    return ParserOptions(
        max_pages=settings.pdf_max_pages,
        normalize_whitespace=settings.normalize_whitespace,
    )


@lru_cache(maxsize=1)
def get_document_text_extractor() -> DocumentTextExtractor:
    """Extractor de texto respaldado por ParserRegistry."""
    return SimpleDocumentTextExtractor(options=get_parser_options())


@lru_cache(maxsize=1)
def get_phase_detector() -> PhaseDetector:
    """Segmentador en fases con límites de Settings."""
    settings = get_settings()
    return RegexPhaseDetector(
        max_snippet_chars=settings.max_snippet_chars,
        max_name_chars=settings.max_phase_name_chars,
    )


@lru_cache(maxsize=1)
def get_fallback_generator() -> TestCaseGenerator:
    """Generador determinístico por párrafos."""
    return ParagraphTestCaseGenerator(
        max_test_cases=get_settings().max_fallback_test_cases
    )


# =============================================================================
# Storage / Repositorios
# =============================================================================


def get_document_storage(root: str | None = None) -> DocumentStoragePort:
    """Storage local; root explícito o Settings.storage_root."""
    return LocalFileStorage(root or get_settings().storage_root)


@lru_cache(maxsize=1)
def get_test_case_repository() -> TestCaseRepository:
    """Repositorio de test cases (in-memory)."""
    return InMemoryTestCaseRepository()


# =============================================================================
# Casos de uso
# =============================================================================


def get_extract_prd_test_cases_use_case(
    *,
    storage: DocumentStoragePort | None = None,
    generator: TestCaseGenerator | None = None,
) -> ExtractPrdTestCasesUseCase:
    """
    Compone el caso de uso principal.

    generator: generador externo opcional; sin él se usa directamente el
    fallback por párrafos.
    """
    return ExtractPrdTestCasesUseCase(
        storage=storage or get_document_storage(),
        extractor=get_document_text_extractor(),
        phase_detector=get_phase_detector(),
        repository=get_test_case_repository(),
        fallback_generator=get_fallback_generator(),
        generator=generator,
        max_generator_chars=get_settings().max_generator_chars,
    )
