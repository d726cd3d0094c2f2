"""Mock account endpoints and the static history list."""

import logging

from fastapi import APIRouter, HTTPException, status

from docgenie.account.auth import SignupError, mock_login, mock_signup
from docgenie.account.history import list_history
from docgenie.models.schemas import HistoryEntry, LoginRequest, SignupRequest, User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])


@router.post("/auth/login", response_model=User)
async def login(request: LoginRequest) -> User:
    """Log in with any non-empty email and password."""
    return mock_login(request.email, request.password)


@router.post("/auth/signup", response_model=User)
async def signup(request: SignupRequest) -> User:
    """Create a throwaway profile.

    Raises:
        400: Missing fields, mismatched or too short password.
    """
    try:
        return mock_signup(
            request.full_name,
            request.email,
            request.password,
            request.confirm_password,
        )
    except SignupError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e


@router.get("/history", response_model=list[HistoryEntry])
async def history() -> list[HistoryEntry]:
    """List previously analyzed documents."""
    return list_history()
