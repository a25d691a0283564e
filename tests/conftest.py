"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Build real documents in memory (DOCX, XLSX, PDF) for parser tests
  - Configure test environment and reset cached singletons

Collaborators:
  - pytest: Test framework
  - python-docx / openpyxl / pypdf: document builders
  - prd_extractor.container / crosscutting.config: cached singletons

Notes:
  - Fixtures are auto-discovered by pytest
  - Settings ignore any local .env file during tests
"""

import os
import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, Sequence

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from prd_extractor import container  # noqa: E402
from prd_extractor.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def _reset_singletons():
    """R: Each test sees fresh Settings and container singletons."""
    caches = (
        app_config.get_settings,
        container.get_parser_options,
        container.get_document_text_extractor,
        container.get_phase_detector,
        container.get_fallback_generator,
        container.get_test_case_repository,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


# ============================================================================
# Document builders
# ============================================================================


@pytest.fixture
def docx_bytes() -> Callable[..., bytes]:
    """R: Build a DOCX in memory from paragraphs and optional table rows."""

    def _build(
        paragraphs: Sequence[str],
        table_rows: Sequence[Sequence[str]] | None = None,
    ) -> bytes:
        from docx import Document

        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        if table_rows:
            table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for r, row in enumerate(table_rows):
                for c, value in enumerate(row):
                    table.cell(r, c).text = value
        out = BytesIO()
        doc.save(out)
        return out.getvalue()

    return _build


@pytest.fixture
def xlsx_bytes() -> Callable[..., bytes]:
    """R: Build an XLSX in memory from {sheet_name: rows} (ordered)."""

    def _build(sheets: dict[str, Sequence[Sequence[object]]]) -> bytes:
        from openpyxl import Workbook

        wb = Workbook()
        first = True
        for name, rows in sheets.items():
            if first:
                ws = wb.active
                ws.title = name
                first = False
            else:
                ws = wb.create_sheet(name)
            for row in rows:
                ws.append(list(row))
        out = BytesIO()
        wb.save(out)
        return out.getvalue()

    return _build


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """R: A valid one-page PDF without any text."""
    from pypdf import PdfWriter

    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    out = BytesIO()
    writer.write(out)
    return out.getvalue()


@pytest.fixture
def prd_text() -> str:
    """R: Small PRD with two phases and paragraph breaks."""
    return (
        "Product Requirements\n"
        "\n"
        "Phase 1: Onboarding\n"
        "Users can sign up with email. A confirmation mail is sent.\n"
        "\n"
        "Users can log in after confirming.\n"
        "\n"
        "Phase 2: Payments\n"
        "Users can add a card. Cards are validated.\n"
    )
