"""User-facing account plumbing: mock auth, static history, API key storage."""

from docgenie.account.api_key_store import API_KEY_STORAGE_KEY, ApiKeyStore
from docgenie.account.auth import SignupError, mock_login, mock_signup
from docgenie.account.history import get_history_entry, list_history

__all__ = [
    "API_KEY_STORAGE_KEY",
    "ApiKeyStore",
    "SignupError",
    "get_history_entry",
    "list_history",
    "mock_login",
    "mock_signup",
]
