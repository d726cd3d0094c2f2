"""Pytest fixtures and shared test configuration.

Fixtures:
    - pdf_bytes: Factory building real PDFs with one text line per page
    - sample_pdf: Small three-page PDF
    - fake_gemini: Factory for a simulated generateContent endpoint
    - async_client: HTTPX client for API testing
"""

import io
import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from docgenie.api import app
from docgenie.models.schemas import UploadedFile
from docgenie.qa.config import QAConfig
from docgenie.qa.gemini_client import GeminiClient
from docgenie.qa.service import QAService

VALID_API_KEY = "AIzaSy-test-key-0123456789"


def build_pdf(page_texts: list[str]) -> bytes:
    """Write a PDF with one Helvetica text line per page ('' for a blank page)."""
    writer = PdfWriter()
    font = writer._add_object(
        DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject("/Helvetica"),
            }
        )
    )

    for text in page_texts:
        page = writer.add_blank_page(width=612, height=792)
        if not text:
            continue
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = DecodedStreamObject()
        stream.set_data(f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1"))
        page[NameObject("/Contents")] = writer._add_object(stream)
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): font})}
        )

    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class FakeGemini:
    """Simulated generateContent endpoint recording every request."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_prompt(self) -> str:
        body = json.loads(self.requests[-1].content)
        return body["contents"][0]["parts"][0]["text"]

    def service(self, config: QAConfig | None = None) -> QAService:
        config = config or QAConfig()
        client = GeminiClient(config, transport=httpx.MockTransport(self.handler))
        return QAService(config=config, client=client)


def gemini_answer(*parts: str) -> dict[str, Any]:
    """Build a successful generateContent response body."""
    return {"candidates": [{"content": {"parts": [{"text": part} for part in parts]}}]}


@pytest.fixture
def pdf_bytes() -> Callable[[list[str]], bytes]:
    """Return the PDF builder.

    Returns:
        Function turning a list of page texts into PDF bytes.
    """
    return build_pdf


@pytest.fixture
def sample_pdf() -> bytes:
    return build_pdf(
        [
            "Information security policy for Acme Corp.",
            "Passwords must be rotated every 90 days.",
            "Incidents are reported to the security team.",
        ]
    )


@pytest.fixture
def sample_file(sample_pdf: bytes) -> UploadedFile:
    return UploadedFile.from_bytes("policy.pdf", sample_pdf)


@pytest.fixture
def fake_gemini() -> type[FakeGemini]:
    return FakeGemini


@pytest.fixture
def api_key() -> str:
    return VALID_API_KEY


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def answer_payload() -> Callable[..., dict[str, Any]]:
    """Return the builder for successful generateContent response bodies."""
    return gemini_answer
