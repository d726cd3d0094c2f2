"""Persistence of the user's Gemini API key.

The key lives in a browser-scoped key-value store (NiceGUI's
``app.storage.user`` in the UI, any mutable mapping in tests) under one
fixed name, so saving always replaces the previous key.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from docgenie.models.schemas import ApiKeyUpdate

logger = logging.getLogger(__name__)

API_KEY_STORAGE_KEY = "docgenie_api_key"


class ApiKeyStore:
    """Reads and writes the single stored API key."""

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self._storage = storage

    def get(self) -> str:
        """Return the stored key, or '' when none is saved."""
        return self._storage.get(API_KEY_STORAGE_KEY) or ""

    def save(self, api_key: str) -> str:
        """Store a trimmed key, replacing any previous one.

        Returns:
            The key as stored.

        Raises:
            pydantic.ValidationError: If the key is blank.
        """
        update = ApiKeyUpdate(api_key=api_key)
        self._storage[API_KEY_STORAGE_KEY] = update.api_key
        logger.info("API key saved")
        return update.api_key

    def clear(self) -> None:
        self._storage.pop(API_KEY_STORAGE_KEY, None)
