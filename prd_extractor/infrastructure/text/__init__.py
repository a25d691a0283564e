"""
Text processing adapters.

Exports:
  - detect_phases / RegexPhaseDetector (segmentación en fases)
  - truncate_phase_name
"""

from .phase_segmenter import (
    INITIAL_PHASE_NAME,
    RegexPhaseDetector,
    detect_phases,
    is_phase_header,
    truncate_phase_name,
)

__all__ = [
    "INITIAL_PHASE_NAME",
    "RegexPhaseDetector",
    "detect_phases",
    "is_phase_header",
    "truncate_phase_name",
]
