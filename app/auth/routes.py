# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for registration, login and the current session.
#
# Registration does not create a user: it stores a pending approval that a
# governmental user approves through /api/approvals.
# =============================================================================

import logging

from fastapi import APIRouter, Response

from app.auth.tokens import create_session_token
from app.config import settings
from app.dependencies import CurrentUser
from app.exceptions import UnauthorizedError
from core.models.user import LoginRequest, LoginResponse, RegistrationRequest, UserProfile
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register")
async def register(request: RegistrationRequest) -> dict:
    """
    Submit a registration for approval.

    Raises:
        409: Email, mobile or ID number already in use
    """
    pending = UserService.register(request)
    return {"message": "Registration submitted for approval", "id": pending["id"]}


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, response: Response) -> LoginResponse:
    """
    Log in and receive the session cookie.

    Raises:
        401: Unknown user or wrong password
        403: Account role differs from the requested role
    """
    user = UserService.authenticate(request.username, request.password, request.role)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    logger.info(f"User logged in: {user['id']}")
    return LoginResponse(id=user["id"], username=user["username"], role=user["role"])


@router.get("/me", response_model=UserProfile)
async def get_current_user_info(user: CurrentUser) -> UserProfile:
    """
    Get the current user's profile (never includes the password).

    Raises:
        401: If not logged in, or the account no longer exists
    """
    profile = UserService.get_user(user.id)
    if not profile:
        raise UnauthorizedError()
    return UserProfile(**profile)


@router.post("/logout")
async def logout(response: Response) -> dict:
    """Clear the session cookie."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME, samesite="lax")
    return {"ok": True}
