"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .test_case_repository import InMemoryTestCaseRepository

__all__ = ["InMemoryTestCaseRepository"]
