"""FastAPI endpoints for DocGenie.

Endpoints:
    - GET /health: Service health status
    - POST /upload/pdf: PDF validation before a chat starts
    - POST /chat/ask: Answer a question about an uploaded PDF
    - POST /auth/login, POST /auth/signup: Mock authentication
    - GET /history: Static document history
"""

from docgenie.api.app import app, create_app

__all__ = ["app", "create_app"]
