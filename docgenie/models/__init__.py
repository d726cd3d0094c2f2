"""Pydantic models shared by the API, the QA pipeline and the UI.

Models:
    - ChatMessage: Individual message in a chat session
    - UploadedFile: PDF bytes plus name/size metadata
    - HistoryEntry: Static history list item
    - User: Profile produced by the mock auth
    - AskResponse / PDFUploadResponse: API payloads
"""

from docgenie.models.schemas import (
    ApiKeyUpdate,
    AskResponse,
    ChatMessage,
    HistoryEntry,
    LoginRequest,
    Page,
    PDFUploadResponse,
    SignupRequest,
    UploadedFile,
    User,
)

__all__ = [
    "ApiKeyUpdate",
    "AskResponse",
    "ChatMessage",
    "HistoryEntry",
    "LoginRequest",
    "Page",
    "PDFUploadResponse",
    "SignupRequest",
    "UploadedFile",
    "User",
]
