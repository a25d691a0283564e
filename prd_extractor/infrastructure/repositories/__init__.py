"""Repository adapters."""

from .in_memory import InMemoryTestCaseRepository

__all__ = ["InMemoryTestCaseRepository"]
