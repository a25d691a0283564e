"""
===============================================================================
ARCHIVO: spreadsheet_parser.py
===============================================================================

CRC CARD (Class)
-------------------------------------------------------------------------------
Clase:
    SpreadsheetParser

Responsabilidades:
    - Leer workbooks (.xlsx con openpyxl, .xls con xlrd, .csv con csv).
    - Serializar cada hoja a CSV (una fila por línea, sin salto final).
    - Unir las hojas no vacías con una línea en blanco ("\\n\\n").
    - Omitir hojas cuyo CSV queda vacío (no se unen strings vacíos).

Colaboradores:
    - contracts.ParserOptions / ExtractedText
    - errors.DecodeError
    - file_types (sufijo -> motor)
===============================================================================
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime, time
from typing import Any, Iterable, Sequence

from .contracts import BaseParser, ExtractedText, ParserOptions
from .errors import DecodeError
from .file_types import CSV_SUFFIX, XLS_SUFFIX, XLSX_SUFFIX
from .normalize import truncate_text

SHEET_SEPARATOR = "\n\n"

Row = Sequence[Any]


def format_cell(value: Any) -> str:
    """
    Representación textual de una celda.

    Reglas:
      - None -> ""
      - bool -> TRUE / FALSE
      - float entero (3.0) -> "3"
      - fechas -> ISO-8601
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def rows_to_csv(rows: Iterable[Row]) -> str:
    """
    Serializa filas a CSV.

    - Quoting mínimo (solo campos con coma, comillas o saltos).
    - Las filas vacías del final se descartan.
    - Sin salto de línea final: una hoja vacía produce "".
    """
    lines: list[str] = [",".join(_csv_field(v) for v in row) for row in rows]

    while lines and not lines[-1].strip(","):
        lines.pop()

    return "\n".join(lines)


def _csv_field(value: Any) -> str:
    text = format_cell(value)
    if not text:
        return ""
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow([text])
    return buffer.getvalue()


class SpreadsheetParser(BaseParser):
    """Estrategia de parsing para planillas (una salida CSV por hoja)."""

    def __init__(self, file_type: str = XLSX_SUFFIX) -> None:
        self._file_type = file_type

    def parse(self, content: bytes, *, options: ParserOptions) -> ExtractedText:
        try:
            sheets = list(self._read_sheets(content, options=options))
        except Exception as e:
            raise DecodeError(
                f"No se pudo leer la planilla ({self._file_type})",
                file_type=self._file_type,
                original_error=e,
            ) from e

        texts: list[str] = []
        sheet_names: list[str] = []
        for name, rows in sheets:
            sheet_names.append(name)
            txt = rows_to_csv(rows)
            if txt:
                texts.append(txt)

        raw_text = SHEET_SEPARATOR.join(texts)
        raw_text, truncated = truncate_text(raw_text, max_chars=options.max_chars)

        return ExtractedText(
            content=raw_text,
            metadata={"source": self._file_type.lstrip("."), "sheets": sheet_names},
            page_count=len(sheet_names),
            was_truncated=truncated,
        )

    # =========================================================================
    # Motores por formato: cada uno devuelve (nombre_hoja, filas)
    # =========================================================================

    def _read_sheets(
        self, content: bytes, *, options: ParserOptions
    ) -> list[tuple[str, list[Row]]]:
        if self._file_type == CSV_SUFFIX:
            return self._read_csv(content, options=options)
        if self._file_type == XLS_SUFFIX:
            return self._read_xls(content)
        return self._read_xlsx(content)

    @staticmethod
    def _read_xlsx(content: bytes) -> list[tuple[str, list[Row]]]:
        from openpyxl import load_workbook

        workbook = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        try:
            return [
                (ws.title, [list(row) for row in ws.iter_rows(values_only=True)])
                for ws in workbook.worksheets
            ]
        finally:
            workbook.close()

    @staticmethod
    def _read_xls(content: bytes) -> list[tuple[str, list[Row]]]:
        import xlrd

        book = xlrd.open_workbook(file_contents=content)
        sheets: list[tuple[str, list[Row]]] = []
        for sheet in book.sheets():
            rows: list[Row] = []
            for r in range(sheet.nrows):
                row: list[Any] = []
                for cell in sheet.row(r):
                    if cell.ctype == xlrd.XL_CELL_EMPTY:
                        row.append(None)
                    elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                        row.append(bool(cell.value))
                    elif cell.ctype == xlrd.XL_CELL_DATE:
                        row.append(
                            xlrd.xldate.xldate_as_datetime(cell.value, book.datemode)
                        )
                    else:
                        row.append(cell.value)
                rows.append(row)
            sheets.append((sheet.name, rows))
        return sheets

    @staticmethod
    def _read_csv(
        content: bytes, *, options: ParserOptions
    ) -> list[tuple[str, list[Row]]]:
        # utf-8-sig: Excel suele anteponer BOM al exportar CSV
        encoding = options.encoding
        if encoding.lower().replace("_", "-") in {"utf-8", "utf8"}:
            encoding = "utf-8-sig"
        text = content.decode(encoding, errors="replace")
        rows: list[Row] = [list(row) for row in csv.reader(io.StringIO(text))]
        return [("Sheet1", rows)]
