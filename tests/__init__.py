"""Test package for DocGenie.

Structure:
    - unit/: Individual function and class tests
    - integration/: FastAPI app exercised through ASGITransport

PDFs are generated with pypdf in fixtures; the Gemini endpoint is
simulated with httpx.MockTransport. Uses pytest-check for soft assertions.
"""
