"""Mock authentication.

No credentials are stored or verified. Login derives a display name from
the email address; signup only checks that the form is complete and the
password fields agree.
"""

import logging

from docgenie.models.schemas import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class SignupError(ValueError):
    """Raised when the signup form is incomplete or inconsistent."""


def mock_login(email: str, password: str) -> User:
    """Accept any non-empty credentials.

    Raises:
        ValueError: If email or password is empty.
    """
    if not email or not password:
        raise ValueError("Email and password are required")

    logger.info("Mock login accepted")
    return User(name=email.split("@")[0], email=email)


def mock_signup(full_name: str, email: str, password: str, confirm_password: str) -> User:
    """Check the signup form and fabricate a user.

    Raises:
        SignupError: With the message to show above the form.
    """
    if not full_name or not email or not password or not confirm_password:
        raise SignupError("All fields are required")

    if password != confirm_password:
        raise SignupError("Passwords do not match")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise SignupError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    logger.info("Mock signup accepted")
    return User(name=full_name, email=email)
