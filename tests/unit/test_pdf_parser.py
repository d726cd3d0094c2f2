"""Unit tests for PDF validation and extraction."""

import pytest
import pytest_check as check

from docgenie.parsing.pdf_parser import (
    MAX_FILE_SIZE,
    MAX_PAGES,
    FileTooLargeError,
    PDFParseError,
    UnsupportedFileTypeError,
    collapse_whitespace,
    extract_pages,
    validate_upload,
)


class TestExtractPagesValid:
    """Tests for successful text extraction."""

    def test_extracts_text_per_page(self, sample_pdf: bytes) -> None:
        """Each page becomes one entry, in page order."""
        result = extract_pages(sample_pdf)

        check.equal(len(result.pages), 3)
        check.equal(result.total_pages, 3)
        check.is_in("Information security", result.pages[0])
        check.is_in("90 days", result.pages[1])
        check.is_in("security team", result.pages[2])

    def test_page_text_is_whitespace_collapsed(self, pdf_bytes) -> None:
        """Runs of spaces inside page text are collapsed to one."""
        result = extract_pages(pdf_bytes(["Quarterly     revenue    grew"]))

        check.equal(result.pages[0], "Quarterly revenue grew")

    def test_stops_at_page_cap(self, pdf_bytes) -> None:
        """Documents longer than the cap only yield the first pages."""
        document = pdf_bytes([f"Marker {n}" for n in range(1, 26)])

        result = extract_pages(document)

        check.equal(len(result.pages), MAX_PAGES)
        check.equal(result.total_pages, 25)
        check.is_in("Marker 20", result.pages[-1])
        check.is_false(any("Marker 21" in page for page in result.pages))

    def test_custom_page_cap(self, sample_pdf: bytes) -> None:
        result = extract_pages(sample_pdf, max_pages=1)

        check.equal(len(result.pages), 1)
        check.equal(result.total_pages, 3)

    def test_empty_page_pdf_succeeds(self, pdf_bytes) -> None:
        """PDF with a blank page parses to a single empty string."""
        result = extract_pages(pdf_bytes([""]))

        check.equal(result.total_pages, 1)
        check.equal(result.pages, [""])

    def test_text_property_joins_pages(self, sample_pdf: bytes) -> None:
        result = extract_pages(sample_pdf)

        check.equal(result.text, "\n\n".join(result.pages))

    def test_returns_metadata_dict(self, sample_pdf: bytes) -> None:
        result = extract_pages(sample_pdf)

        check.is_instance(result.metadata, dict)


class TestExtractPagesRejection:
    """Tests for PDF validation and rejection."""

    def test_rejects_empty_bytes(self) -> None:
        with pytest.raises(PDFParseError, match="Empty file"):
            extract_pages(b"")

    def test_rejects_non_pdf_bytes(self) -> None:
        with pytest.raises(PDFParseError, match="Invalid PDF"):
            extract_pages(b"This is plain text, not a PDF at all.")

    def test_rejects_oversized_file(self) -> None:
        oversized = b"%PDF-1.4" + b"\x00" * (MAX_FILE_SIZE + 1)

        with pytest.raises(FileTooLargeError, match="exceeds maximum"):
            extract_pages(oversized)

    def test_rejects_truncated_pdf(self) -> None:
        with pytest.raises(PDFParseError, match="Corrupt|Failed|no pages"):
            extract_pages(b"%PDF-1.4\n1 0 obj\n<<")


class TestValidateUpload:
    """Tests for the checks run before a chat is opened."""

    def test_accepts_pdf_under_limit(self) -> None:
        validate_upload("report.pdf", "application/pdf", 1024)

    def test_accepts_size_exactly_at_limit(self) -> None:
        validate_upload("report.pdf", "application/pdf", MAX_FILE_SIZE)

    def test_accepts_generic_content_type_with_pdf_extension(self) -> None:
        validate_upload("REPORT.PDF", "application/octet-stream", 10)

    def test_rejects_non_pdf_mime_type(self) -> None:
        with pytest.raises(UnsupportedFileTypeError, match="PDF"):
            validate_upload("notes.pdf", "text/plain", 10)

    def test_rejects_non_pdf_extension(self) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            validate_upload("image.jpg", None, 10)

    def test_pdf_mime_type_accepted_without_pdf_extension(self) -> None:
        validate_upload("scan_2024", "application/pdf", 1024)
        validate_upload("report.PDF.download", "application/pdf", 1024)

    def test_rejects_missing_filename_without_mime_type(self) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            validate_upload(None, None, 10)

    def test_rejects_file_over_limit(self) -> None:
        with pytest.raises(FileTooLargeError, match="10MB"):
            validate_upload("big.pdf", "application/pdf", MAX_FILE_SIZE + 1)

    def test_rejections_are_parse_errors(self) -> None:
        check.is_true(issubclass(FileTooLargeError, PDFParseError))
        check.is_true(issubclass(UnsupportedFileTypeError, PDFParseError))


def test_collapse_whitespace() -> None:
    assert collapse_whitespace("  a \n\n b\t\tc  ") == "a b c"
