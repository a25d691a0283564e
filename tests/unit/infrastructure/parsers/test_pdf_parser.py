"""
Name: PDF Parser Tests

Responsibilities:
  - Validate page joining, max_pages and per-page fault tolerance
  - Avoid depending on font rendering (page text is mocked)
"""

from unittest.mock import MagicMock

import pypdf
import pytest
from prd_extractor.infrastructure.parsers import extract_text
from prd_extractor.infrastructure.parsers.contracts import ParserOptions
from prd_extractor.infrastructure.parsers.errors import DecodeError
from prd_extractor.infrastructure.parsers.pdf_parser import PdfParser

pytestmark = pytest.mark.unit


def _fake_reader(monkeypatch, page_texts):
    pages = []
    for text in page_texts:
        page = MagicMock()
        if isinstance(text, Exception):
            page.extract_text.side_effect = text
        else:
            page.extract_text.return_value = text
        pages.append(page)
    reader = MagicMock()
    reader.pages = pages
    monkeypatch.setattr(pypdf, "PdfReader", MagicMock(return_value=reader))
    return pages


def test_blank_pdf_extracts_empty_text(blank_pdf_bytes):
    result = PdfParser().parse(blank_pdf_bytes, options=ParserOptions())

    assert result.content == ""
    assert result.page_count == 1
    assert result.is_empty


def test_empty_buffer_raises_decode_error():
    with pytest.raises(DecodeError) as exc:
        extract_text(b"", "prd.pdf")

    assert exc.value.file_type == ".pdf"


def test_pages_are_joined_with_newline(monkeypatch):
    _fake_reader(monkeypatch, ["Phase 1: Login", "Phase 2: Pay"])

    assert extract_text(b"%PDF", "prd.pdf") == "Phase 1: Login\nPhase 2: Pay"


def test_empty_pages_are_skipped(monkeypatch):
    _fake_reader(monkeypatch, ["one", "", None, "two"])

    assert extract_text(b"%PDF", "prd.pdf") == "one\ntwo"


def test_broken_page_becomes_warning(monkeypatch):
    _fake_reader(monkeypatch, ["ok", ValueError("bad stream"), "end"])

    result = PdfParser().parse(b"%PDF", options=ParserOptions())

    assert result.content == "ok\nend"
    assert len(result.warnings) == 1
    assert "ValueError" in result.warnings[0]


def test_max_pages_stops_reading(monkeypatch):
    pages = _fake_reader(monkeypatch, ["p1", "p2", "p3"])

    result = PdfParser().parse(b"%PDF", options=ParserOptions(max_pages=2))

    assert result.content == "p1\np2"
    assert result.was_truncated is True
    assert result.page_count == 3
    pages[2].extract_text.assert_not_called()


def test_reader_failure_raises_decode_error(monkeypatch):
    monkeypatch.setattr(pypdf, "PdfReader", MagicMock(side_effect=OSError("boom")))

    with pytest.raises(DecodeError) as exc:
        PdfParser().parse(b"%PDF", options=ParserOptions())

    assert isinstance(exc.value.original_error, OSError)
