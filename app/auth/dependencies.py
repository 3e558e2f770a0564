# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The session token is read from:
# - the session cookie set by POST /api/auth/login (browser client)
# - an `Authorization: Bearer <token>` header (API clients, tests)
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError
from pydantic import ValidationError

from app.config import settings
from app.auth.models import AuthUser
from app.auth.tokens import decode_session_token

logger = logging.getLogger(__name__)

# Bearer is optional: the cookie is the primary carrier
security_optional = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> AuthUser:
    """
    Extract and validate the user from the session token.

    This dependency:
    1. Takes the token from the Bearer header, else the session cookie
    2. Verifies the JWT signature and expiry
    3. Returns an AuthUser with the user's ID, username and role

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    token = _extract_token(request, credentials)
    if not token:
        raise _unauthorized()

    try:
        payload = decode_session_token(token)
    except ExpiredSignatureError:
        logger.warning("Session token has expired")
        raise _unauthorized("Session expired")
    except (JWTError, ValidationError) as e:
        logger.warning(f"Session token validation failed: {e}")
        raise _unauthorized()

    try:
        user_uuid = UUID(payload.sub)
    except ValueError:
        logger.warning(f"Invalid UUID in token: {payload.sub}")
        raise _unauthorized()

    logger.debug(f"Authenticated user: {payload.sub}")
    return AuthUser(id=user_uuid, username=payload.username, role=payload.role)


async def get_current_user_optional(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> Optional[AuthUser]:
    """
    Optionally get the current user.

    Returns None if no token is provided (or it is invalid), instead of
    raising an error. Used by endpoints that answer anonymous callers too,
    such as vote status, and by the action endpoints whose own checks
    decide between 400, 404 and 401.
    """
    try:
        return await get_current_user(request, credentials)
    except HTTPException:
        return None


async def require_governmental(
    user: AuthUser = Depends(get_current_user),
) -> AuthUser:
    """
    Require a governmental account.

    Raises:
        HTTPException: 401 if not logged in, 403 for citizen accounts
    """
    if not user.is_governmental:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    return user
