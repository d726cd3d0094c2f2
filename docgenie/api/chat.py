"""Question answering endpoint.

Each request carries the PDF, the question and the caller's API key; the
server keeps no document state between requests.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Header, HTTPException, UploadFile, status

from docgenie.api.routes import read_upload
from docgenie.models.schemas import AskResponse, ChatMessage
from docgenie.qa.service import QAService, get_qa_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/ask", response_model=AskResponse)
async def ask_question(
    file: UploadFile,
    question: Annotated[str, Form()],
    qa_service: Annotated[QAService, Depends(get_qa_service)],
    x_api_key: Annotated[str | None, Header()] = None,
) -> AskResponse:
    """Answer a question about an uploaded PDF.

    Pipeline failures (bad key, HTTP errors, unreadable PDF) come back as
    the answer text with status 200, the way they appear in the chat.

    Args:
        file: The PDF the question is about (multipart/form-data).
        question: The user's question.
        qa_service: Injected QA service.
        x_api_key: Google AI Studio key from the X-API-Key header.

    Raises:
        400: File is not a PDF.
        413: File exceeds 10MB limit.
        422: Empty question.
    """
    question = question.strip()
    if not question:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail="Question must not be empty",
        )

    upload = await read_upload(file)
    text = await qa_service.answer(question, upload, x_api_key)

    return AskResponse(
        answer=ChatMessage(text=text, is_user=False),
        document=upload.name,
    )
