"""Document question answering.

Turns a question about an uploaded PDF into answer text with a single
call to the Gemini generateContent endpoint.

Responsibilities:
    - Pipeline configuration from the environment
    - Prompt construction from truncated page excerpts
    - HTTP call and status-to-message mapping
    - Per-document chat session state
"""

from docgenie.qa.config import QAConfig, get_qa_config
from docgenie.qa.gemini_client import GeminiAPIError, GeminiClient
from docgenie.qa.service import QAService, get_qa_service
from docgenie.qa.session import ChatBusyError, ChatSession

__all__ = [
    "ChatBusyError",
    "ChatSession",
    "GeminiAPIError",
    "GeminiClient",
    "QAConfig",
    "QAService",
    "get_qa_config",
    "get_qa_service",
]
