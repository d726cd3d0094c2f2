"""Document question answering service.

Core module for turning a question about an uploaded PDF into answer text.

The pipeline is a straight sequence:

1. Check the API key locally (missing or too short keys never hit the network).
2. Extract text from the first pages of the PDF.
3. Build a prompt from truncated per-page excerpts.
4. Make one generateContent call.
5. Map the outcome to user-facing text.

Every failure ends up as chat text. Nothing is retried.
"""

import logging

from docgenie.models.schemas import UploadedFile
from docgenie.parsing.pdf_parser import extract_pages
from docgenie.qa.config import QAConfig, get_qa_config
from docgenie.qa.gemini_client import GeminiAPIError, GeminiClient
from docgenie.qa.prompt import build_prompt

logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = (
    "API key missing or invalid. Open Settings and paste a valid Google AI Studio API key."
)
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait a moment and try again."
NO_RESPONSE_MESSAGE = "No response."
FALLBACK_MESSAGE = (
    "I'm unable to analyze the PDF right now. "
    "Please verify your API key in Settings and try again."
)


def error_message(error: GeminiAPIError) -> str:
    """Map a generative endpoint error status to a chat message."""
    status = error.status_code
    if status in (401, 403):
        return (
            f"Authorization error ({status}). Check that your API key is valid "
            f"and not restricted for this application. Details: {error.details}"
        )
    if status == 429:
        return RATE_LIMIT_MESSAGE
    if status == 400:
        return f"Bad request: {error.details}"
    return f"Service error ({status}). {error.details}"


class QAService:
    """Answers questions about a single uploaded PDF."""

    def __init__(
        self,
        config: QAConfig | None = None,
        client: GeminiClient | None = None,
    ) -> None:
        self._config = config or get_qa_config()
        self._client = client or GeminiClient(self._config)

    def has_valid_key(self, api_key: str | None) -> bool:
        key = (api_key or "").strip()
        return len(key) >= self._config.min_api_key_length

    async def answer(self, question: str, file: UploadedFile, api_key: str | None) -> str:
        """Answer a question about a PDF.

        Args:
            question: The user's question.
            file: The uploaded PDF.
            api_key: The user's Google AI Studio key.

        Returns:
            Answer text, or a user-facing message describing what went wrong.
        """
        if not self.has_valid_key(api_key):
            return INVALID_KEY_MESSAGE
        key = api_key.strip()

        try:
            extracted = extract_pages(file.content, max_pages=self._config.max_pages)
            prompt = build_prompt(
                question,
                file.name,
                extracted.pages,
                max_chars=self._config.page_excerpt_chars,
            )
            logger.info(
                f"Asking about {file.name} ({len(extracted.pages)} of "
                f"{extracted.total_pages} pages, {len(prompt)} prompt chars)"
            )
            text = await self._client.generate(prompt, key)
        except GeminiAPIError as e:
            logger.warning(f"Generative endpoint returned {e.status_code} for {file.name}")
            return error_message(e)
        except Exception:
            logger.exception(f"Failed to answer question about {file.name}")
            return FALLBACK_MESSAGE

        return text or NO_RESPONSE_MESSAGE


# Module-level singleton instance
_qa_service: QAService | None = None


def get_qa_service() -> QAService:
    """Get or create the global QA service.

    Returns:
        The QAService instance.
    """
    global _qa_service
    if _qa_service is None:
        _qa_service = QAService()
    return _qa_service
