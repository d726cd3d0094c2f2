"""DocGenie - ask questions about a PDF and get answers grounded in its pages.

Combines FastAPI for the HTTP API, pypdf for text extraction, httpx for
the Gemini generateContent call, NiceGUI for the browser UI, and Pydantic
for data validation.

Components:
    - api: HTTP endpoints
    - parsing: PDF validation and text extraction
    - qa: Prompt construction, Gemini client and chat sessions
    - account: Mock auth, static history, API key storage
    - ui: Web interface
    - models: Shared schemas
"""

__version__ = "0.1.0"
