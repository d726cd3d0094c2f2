"""PDF handling for the question answering pipeline.

Responsibilities:
    - Upload validation (PDF type, 10MB ceiling, PDF header)
    - Text extraction from the leading pages with pypdf
    - Whitespace normalization of page text
"""

from docgenie.parsing.pdf_parser import (
    FileTooLargeError,
    PDFPages,
    PDFParseError,
    UnsupportedFileTypeError,
    extract_pages,
    validate_upload,
)

__all__ = [
    "FileTooLargeError",
    "PDFPages",
    "PDFParseError",
    "UnsupportedFileTypeError",
    "extract_pages",
    "validate_upload",
]
