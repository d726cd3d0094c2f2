"""Async client for the Gemini generateContent endpoint.

One POST per call, API key as the ``key`` query parameter, no retries.
Non-2xx responses raise GeminiAPIError carrying the status code and the
server-provided detail text.
"""

import json
import logging
from typing import Any

import httpx

from docgenie.qa.config import QAConfig, get_qa_config

logger = logging.getLogger(__name__)


class GeminiAPIError(Exception):
    """Raised when the generative endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, details: str) -> None:
        super().__init__(f"Gemini API returned {status_code}: {details}")
        self.status_code = status_code
        self.details = details


def error_details(response: httpx.Response) -> str:
    """Pull a readable error description out of an error response.

    Prefers ``error.message`` from a JSON body, then the JSON body itself,
    then the raw text.
    """
    try:
        payload = response.json()
    except ValueError:
        return response.text

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return json.dumps(payload)


def candidate_text(payload: dict[str, Any]) -> str:
    """Join the text parts of the first candidate, or '' when there are none."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "\n".join(part["text"] for part in parts if part.get("text"))


class GeminiClient:
    """Thin wrapper around the generateContent REST method."""

    def __init__(
        self,
        config: QAConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional QA configuration. Loads from environment if not provided.
            transport: Optional httpx transport, used to simulate the endpoint in tests.
        """
        self._config = config or get_qa_config()
        self._transport = transport

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the generateContent request body for a single user turn.

        Args:
            prompt: Complete prompt text.

        Returns:
            JSON-serializable body with the configured generation settings.
        """
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._config.temperature,
                "maxOutputTokens": self._config.max_output_tokens,
            },
        }

    async def generate(self, prompt: str, api_key: str) -> str:
        """Send a prompt and return the generated text.

        Args:
            prompt: Complete prompt text.
            api_key: Google AI Studio API key.

        Returns:
            Generated text, '' when the response carries no text parts.

        Raises:
            GeminiAPIError: On any non-2xx response.
            httpx.HTTPError: On network failures.
        """
        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self._config.endpoint,
                params={"key": api_key},
                json=self.build_payload(prompt),
            )

        if not response.is_success:
            details = error_details(response)
            logger.warning(
                f"Gemini request failed with status {response.status_code}"
            )
            raise GeminiAPIError(response.status_code, details)

        return candidate_text(response.json())
