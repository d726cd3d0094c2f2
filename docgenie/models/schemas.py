import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Page(str, Enum):
    """Views of the single-page UI."""

    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    CHAT = "chat"


class ChatMessage(BaseModel):
    """A single message in a chat session.

    Attributes:
        id: Unique message identifier.
        text: The message text.
        is_user: True for user questions, False for assistant answers.
        timestamp: When the message was created.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    text: str
    is_user: bool
    timestamp: datetime = Field(default_factory=datetime.now)


class UploadedFile(BaseModel):
    """A PDF held by a chat session for its lifetime.

    Attributes:
        name: Original filename.
        size: Size in bytes.
        content_type: MIME type reported by the client.
        content: Raw PDF bytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(ge=0)
    content_type: str = "application/pdf"
    content: bytes = b""

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: str = "application/pdf") -> "UploadedFile":
        return cls(name=name, size=len(content), content_type=content_type, content=content)


class HistoryEntry(BaseModel):
    """A previously analyzed document shown in the history dialog."""

    id: str
    name: str
    size: int = Field(ge=0)
    upload_date: datetime
    analysis_complete: bool


class User(BaseModel):
    """Profile fabricated by the mock login and signup."""

    name: str
    email: str


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SignupRequest(BaseModel):
    full_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


class AskResponse(BaseModel):
    """Answer produced for a question about an uploaded document.

    Attributes:
        answer: Assistant message carrying the answer or a user-facing error.
        document: Name of the document the question was asked about.
    """

    answer: ChatMessage
    document: str


class PDFUploadResponse(BaseModel):
    """Response after PDF upload validation.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        size: File size in bytes.
        success: Whether the upload was accepted.
        error: Error message if upload failed.
    """

    filename: str
    pages: int
    size: int
    success: bool
    error: str | None = None


class ApiKeyUpdate(BaseModel):
    """API key entered in the settings dialog."""

    api_key: str = Field(..., min_length=1)

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip whitespace from the key before validation."""
        if isinstance(v, str):
            return v.strip()
        return v
