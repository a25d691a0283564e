"""
===============================================================================
ARCHIVO: errors.py
===============================================================================

CRC CARD (Module)
-------------------------------------------------------------------------------
Nombre:
    Excepciones Tipadas del Sub-sistema de Parsers

Responsabilidades:
    - Modelar errores explícitos (sin ValueError genérico).
    - Transportar contexto útil (original_error, tipo de archivo, encoding).
    - Permitir mapping consistente a errores de caso de uso / exit codes.

Colaboradores:
    - pdf_parser.PdfParser
    - docx_parser.DocxParser
    - spreadsheet_parser.SpreadsheetParser
    - registry.TextParser
    - application/usecases (mapea ParserError -> UNPROCESSABLE)
===============================================================================
"""

from __future__ import annotations


class ParserError(Exception):
    """
    Error base de todo el sub-sistema de parsing.

    Nota:
      - "code" ayuda a registrar el tipo de falla en logs.
    """

    code: str = "PARSER_ERROR"


class DecodeError(ParserError):
    """Se lanza cuando el decoder del formato no pudo leer el buffer."""

    code = "DECODE_FAILED"

    def __init__(
        self,
        message: str,
        *,
        file_type: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.file_type = file_type
        self.original_error = original_error


class EncodingError(ParserError):
    """
    Se lanza cuando el texto plano no es válido en el encoding pedido.

    Solo ocurre con ParserOptions(strict_encoding=True); por defecto los
    bytes inválidos se reemplazan por U+FFFD.
    """

    code = "ENCODING_FAILED"

    def __init__(
        self, encoding: str, *, original_error: Exception | None = None
    ) -> None:
        super().__init__(f"El contenido no es texto {encoding} válido")
        self.encoding = encoding
        self.original_error = original_error
