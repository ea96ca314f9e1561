"""
Tools for CV Chat.

- pdf_parser: Extract text from uploaded markdown, text and PDF CVs
"""

from cvchat.tools.pdf_parser import (
    SUPPORTED_SUFFIXES,
    DocumentReadError,
    extract_document_text,
    parse_pdf,
    read_document_from_path,
)

__all__ = [
    "SUPPORTED_SUFFIXES",
    "DocumentReadError",
    "extract_document_text",
    "parse_pdf",
    "read_document_from_path",
]
