"""Question answering configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent endpoint and
the limits applied while building document-grounded prompts.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash-latest"


class QAConfig(BaseModel):
    """Configuration for the document QA pipeline.

    The API key is not part of the configuration: every user supplies
    their own through the settings dialog.

    Attributes:
        base_url: Generative Language API base URL.
        model_name: Gemini model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_output_tokens: Maximum tokens in the generated answer.
        max_pages: Number of leading PDF pages read per question.
        page_excerpt_chars: Characters of each page embedded in the prompt.
        min_api_key_length: Keys shorter than this are rejected locally.
        request_timeout: Seconds to wait for the generative endpoint.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        description="Generative Language API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for answer generation",
    )
    max_output_tokens: int = Field(
        default=800,
        ge=1,
        le=8192,
        description="Maximum tokens in generated answer",
    )
    max_pages: int = Field(default=20, ge=1)
    page_excerpt_chars: int = Field(default=1200, ge=1)
    min_api_key_length: int = Field(default=10, ge=1)
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TIMEOUT", "120")),
        gt=0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so endpoint paths join cleanly."""
        if not v or not v.strip():
            raise ValueError("GEMINI_BASE_URL must not be empty")
        return v.strip().rstrip("/")

    @field_validator("model_name")
    @classmethod
    def strip_models_prefix(cls, v: str) -> str:
        """Accept both 'gemini-...' and 'models/gemini-...' identifiers."""
        v = v.strip()
        if v.startswith("models/"):
            v = v.removeprefix("models/")
        if not v:
            raise ValueError("GEMINI_MODEL must not be empty")
        return v

    @property
    def endpoint(self) -> str:
        """URL of the generateContent method for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_qa_config() -> QAConfig:
    """Create QA configuration from environment.

    Returns:
        Configured QAConfig instance.
    """
    return QAConfig()
