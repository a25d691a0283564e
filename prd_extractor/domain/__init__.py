"""
Domain Layer

Entidades y puertos (Protocols) sin dependencias de infraestructura.
"""

from .entities import ManagedTestCase, Phase, TestCaseDraft
from .repositories import TestCaseRepository
from .services import (
    DocumentStoragePort,
    DocumentTextExtractor,
    PhaseDetector,
    TestCaseGenerator,
)

__all__ = [
    "Phase",
    "TestCaseDraft",
    "ManagedTestCase",
    "TestCaseRepository",
    "DocumentStoragePort",
    "DocumentTextExtractor",
    "PhaseDetector",
    "TestCaseGenerator",
]
