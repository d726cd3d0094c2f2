"""PDF validation and text extraction using pypdf.

Uploads are checked for type and size before they reach the chat view.
Extraction reads only the first pages of a document and returns one
whitespace-collapsed string per page.
"""

import io
import logging
import re

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
MAX_PAGES = 20
PDF_MIME_TYPE = "application/pdf"
PDF_MAGIC_BYTES = b"%PDF"

_WHITESPACE = re.compile(r"\s+")


class PDFPages(BaseModel):
    """Text extracted from the leading pages of a PDF.

    Attributes:
        pages: Collapsed text of each extracted page, in page order.
        total_pages: Page count of the whole document.
        metadata: Document metadata (title, author, etc.).
    """

    pages: list[str]
    total_pages: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n\n".join(self.pages)


class PDFParseError(Exception):
    """Raised when a file cannot be accepted or read as a PDF."""

    pass


class UnsupportedFileTypeError(PDFParseError):
    """Raised when an upload is not a PDF."""


class FileTooLargeError(PDFParseError):
    """Raised when an upload exceeds MAX_FILE_SIZE."""


def check_pdf_type(filename: str | None, content_type: str | None) -> None:
    """Reject uploads that are not declared as PDF.

    The MIME type decides when the client sent a specific one; generic
    or missing types fall back to the file extension.

    Raises:
        UnsupportedFileTypeError: If the upload is not a PDF.
    """
    if content_type == PDF_MIME_TYPE:
        return
    if content_type and content_type != "application/octet-stream":
        raise UnsupportedFileTypeError("Please upload a PDF file")

    if not filename or not filename.lower().endswith(".pdf"):
        raise UnsupportedFileTypeError("Please upload a PDF file")


def check_file_size(size: int) -> None:
    """Reject uploads above the 10MB ceiling.

    Raises:
        FileTooLargeError: If size exceeds MAX_FILE_SIZE.
    """
    if size > MAX_FILE_SIZE:
        size_mb = size / (1024 * 1024)
        raise FileTooLargeError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        )


def validate_upload(filename: str | None, content_type: str | None, size: int) -> None:
    """Run the checks an upload must pass before a chat can start."""
    check_pdf_type(filename, content_type)
    check_file_size(size)


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    check_file_size(len(file_content))

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    metadata: dict[str, str] = {}

    try:
        if reader.metadata:
            for key, name in (("/Title", "title"), ("/Author", "author"), ("/Subject", "subject")):
                value = reader.metadata.get(key)
                if value:
                    metadata[name] = str(value)
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return metadata


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def extract_pages(file_content: bytes, max_pages: int = MAX_PAGES) -> PDFPages:
    """Extract the text of the first ``max_pages`` pages of a PDF.

    Best effort: a page whose text cannot be extracted contributes an
    empty string so page numbering stays aligned.

    Args:
        file_content: Raw bytes of the PDF file.
        max_pages: Upper bound on the number of pages read.

    Returns:
        PDFPages with one collapsed string per extracted page.

    Raises:
        PDFParseError: If the file is empty, too large, not a PDF or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        total_pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if total_pages == 0:
        raise PDFParseError("PDF contains no pages")

    pages: list[str] = []
    for i in range(min(total_pages, max_pages)):
        try:
            page_text = reader.pages[i].extract_text() or ""
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            page_text = ""
        pages.append(collapse_whitespace(page_text))

    if not any(pages):
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFPages(
        pages=pages,
        total_pages=total_pages,
        metadata=_extract_metadata(reader),
    )
