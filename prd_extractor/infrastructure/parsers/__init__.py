"""
===============================================================================
MÓDULO: Infrastructure / Parsers
===============================================================================

CRC CARD (Package)
-------------------------------------------------------------------------------
Nombre:
    infrastructure.parsers

Responsabilidades:
    - Exponer el adaptador principal usado por DI (SimpleDocumentTextExtractor).
    - Exponer el atajo funcional extract_text(buffer, filename).
    - Exponer errores tipados (DecodeError / EncodingError).

Colaboradores:
    - document_text_extractor.SimpleDocumentTextExtractor
    - registry.ParserRegistry
    - errors.*
===============================================================================
"""

from .contracts import ExtractedText, ParserOptions
from .document_text_extractor import SimpleDocumentTextExtractor, extract_text
from .errors import DecodeError, EncodingError, ParserError
from .file_types import SUPPORTED_SUFFIXES
from .registry import ParserRegistry

__all__ = [
    "SimpleDocumentTextExtractor",
    "extract_text",
    "ExtractedText",
    "ParserOptions",
    "ParserRegistry",
    "ParserError",
    "DecodeError",
    "EncodingError",
    "SUPPORTED_SUFFIXES",
]
