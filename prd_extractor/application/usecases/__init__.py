"""
Use Cases Layer (Business Operations)

Usage
-----

    from prd_extractor.application.usecases import (
        ExtractPrdTestCasesInput,
        ExtractPrdTestCasesUseCase,
    )
"""

from .extract_prd_test_cases import (
    ExtractPrdTestCasesInput,
    ExtractPrdTestCasesUseCase,
    managed_test_case_id,
    select_phase,
)
from .results import ExtractionError, ExtractionErrorCode, ExtractPrdTestCasesResult

__all__ = [
    "ExtractPrdTestCasesInput",
    "ExtractPrdTestCasesUseCase",
    "ExtractPrdTestCasesResult",
    "ExtractionError",
    "ExtractionErrorCode",
    "managed_test_case_id",
    "select_phase",
]
