"""PDF upload endpoint.

Validates an upload the same way the landing page does before a chat is
opened: PDF type, 10MB ceiling, readable PDF.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from docgenie.models.schemas import PDFUploadResponse, UploadedFile
from docgenie.parsing.pdf_parser import (
    FileTooLargeError,
    PDFParseError,
    extract_pages,
    validate_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


def _to_http_error(error: PDFParseError) -> HTTPException:
    """Translate an upload rejection into the matching HTTP status."""
    if isinstance(error, FileTooLargeError):
        code = status.HTTP_413_CONTENT_TOO_LARGE
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))


async def read_upload(file: UploadFile) -> UploadedFile:
    """Read a multipart upload after checking its type and size.

    Args:
        file: The uploaded file.

    Returns:
        The upload as an UploadedFile.

    Raises:
        HTTPException: 400 if the file is not a PDF, 413 if it exceeds 10MB.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    content = await file.read()

    try:
        validate_upload(file.filename, file.content_type, len(content))
    except PDFParseError as e:
        logger.warning(f"Rejected upload {file.filename}: {e}")
        raise _to_http_error(e) from e

    return UploadedFile.from_bytes(
        file.filename,
        content,
        content_type=file.content_type or "application/pdf",
    )


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(file: UploadFile) -> PDFUploadResponse:
    """Validate a PDF before a chat about it is started.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        PDFUploadResponse with filename, page count and size.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds 10MB limit.
    """
    upload = await read_upload(file)

    try:
        extracted = extract_pages(upload.content, max_pages=1)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {upload.name}: {e}")
        raise _to_http_error(e) from e

    logger.info(f"Accepted PDF: {upload.name} ({extracted.total_pages} pages)")

    return PDFUploadResponse(
        filename=upload.name,
        pages=extracted.total_pages,
        size=upload.size,
        success=True,
    )
