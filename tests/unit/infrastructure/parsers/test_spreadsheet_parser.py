"""
Name: Spreadsheet Parser Tests

Responsibilities:
  - Validate per-sheet CSV serialization and sheet joining
  - Cover .xlsx (real openpyxl workbooks), .csv and .xls (mocked xlrd book)
"""

from datetime import datetime
from types import SimpleNamespace

import pytest
import xlrd
from prd_extractor.infrastructure.parsers import extract_text
from prd_extractor.infrastructure.parsers.contracts import ParserOptions
from prd_extractor.infrastructure.parsers.errors import DecodeError
from prd_extractor.infrastructure.parsers.spreadsheet_parser import (
    SpreadsheetParser,
    format_cell,
    rows_to_csv,
)

pytestmark = pytest.mark.unit


# =============================================================================
# Helpers puros
# =============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "TRUE"),
        (False, "FALSE"),
        (3.0, "3"),
        (2.5, "2.5"),
        (7, "7"),
        (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05"),
        ("text", "text"),
    ],
)
def test_format_cell(value, expected):
    assert format_cell(value) == expected


def test_rows_to_csv_quotes_only_when_needed():
    rows = [["name", "note"], ["widget", "a, b"], ["quote", 'say "hi"']]

    assert rows_to_csv(rows) == 'name,note\nwidget,"a, b"\nquote,"say ""hi"""'


def test_rows_to_csv_drops_trailing_empty_rows():
    rows = [["a", "b"], [None, None], [None, None]]

    assert rows_to_csv(rows) == "a,b"


def test_rows_to_csv_keeps_inner_empty_rows():
    rows = [["a"], [None], ["b"]]

    assert rows_to_csv(rows) == "a\n\nb"


def test_rows_to_csv_empty_sheet_is_empty_string():
    assert rows_to_csv([]) == ""
    assert rows_to_csv([[None, None]]) == ""


# =============================================================================
# .xlsx
# =============================================================================


def test_xlsx_skips_empty_sheets(xlsx_bytes):
    content = xlsx_bytes({"A": [["x", "y"], [1, 2]], "B": []})

    assert extract_text(content, "book.xlsx") == "x,y\n1,2"


def test_xlsx_joins_sheets_with_blank_line(xlsx_bytes):
    content = xlsx_bytes({"Login": [["step", "ok"]], "Pay": [["card", "valid"]]})

    assert extract_text(content, "plan.XLSX") == "step,ok\n\ncard,valid"


def test_xlsx_formats_typed_cells(xlsx_bytes):
    content = xlsx_bytes({"Data": [[2.5, True, datetime(2024, 1, 2)]]})

    assert extract_text(content, "data.xlsx") == "2.5,TRUE,2024-01-02T00:00:00"


def test_xlsx_metadata_lists_all_sheets(xlsx_bytes):
    content = xlsx_bytes({"A": [["x"]], "B": []})

    result = SpreadsheetParser(".xlsx").parse(content, options=ParserOptions())

    assert result.metadata["sheets"] == ["A", "B"]
    assert result.page_count == 2


def test_xlsx_corrupt_raises_decode_error():
    with pytest.raises(DecodeError) as exc:
        extract_text(b"definitely not a zip", "broken.xlsx")

    assert exc.value.file_type == ".xlsx"
    assert exc.value.code == "DECODE_FAILED"


# =============================================================================
# .csv
# =============================================================================


def test_csv_is_reserialized():
    assert extract_text(b"name,qty\nwidget,3\n", "items.csv") == "name,qty\nwidget,3"


def test_csv_strips_bom_and_keeps_quoted_fields():
    content = '\ufeffa,"b,c"\r\n'.encode("utf-8")

    assert extract_text(content, "items.csv") == 'a,"b,c"'


def test_csv_empty_file_is_empty_text():
    assert extract_text(b"", "empty.csv") == ""


# =============================================================================
# .xls (libro simulado: xlrd ya no escribe .xls)
# =============================================================================


def _cell(ctype, value):
    return SimpleNamespace(ctype=ctype, value=value)


def test_xls_reads_cells_by_type(monkeypatch):
    sheet = SimpleNamespace(
        name="Sheet1",
        nrows=2,
        row=lambda r: [
            [_cell(xlrd.XL_CELL_TEXT, "name"), _cell(xlrd.XL_CELL_TEXT, "when")],
            [
                _cell(xlrd.XL_CELL_NUMBER, 3.0),
                _cell(xlrd.XL_CELL_DATE, 45292.0),
                _cell(xlrd.XL_CELL_BOOLEAN, 1),
                _cell(xlrd.XL_CELL_EMPTY, ""),
            ],
        ][r],
    )
    empty = SimpleNamespace(name="Empty", nrows=0, row=lambda r: [])
    book = SimpleNamespace(datemode=0, sheets=lambda: [sheet, empty])
    monkeypatch.setattr(xlrd, "open_workbook", lambda file_contents: book)

    result = SpreadsheetParser(".xls").parse(b"ignored", options=ParserOptions())

    assert result.content == "name,when\n3,2024-01-01T00:00:00,TRUE,"
    assert result.metadata["sheets"] == ["Sheet1", "Empty"]


def test_xls_corrupt_raises_decode_error():
    with pytest.raises(DecodeError) as exc:
        extract_text(b"not an ole2 workbook", "legacy.xls")

    assert exc.value.file_type == ".xls"
