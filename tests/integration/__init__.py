"""Integration tests for the HTTP API.

Requests go through the real FastAPI app; only the generative endpoint
is simulated, so no API key or network access is needed.
"""
