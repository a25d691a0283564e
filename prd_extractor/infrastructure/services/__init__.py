"""Service adapters (test-case generators)."""

from .paragraph_test_case_generator import ParagraphTestCaseGenerator, split_paragraphs

__all__ = ["ParagraphTestCaseGenerator", "split_paragraphs"]
