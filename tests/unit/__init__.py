"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Upload checks and page extraction
    - qa/: Config, prompt building, Gemini client, pipeline, chat session
    - account/: Mock auth, history, API key storage
    - ui/: View routing state and formatting
"""
