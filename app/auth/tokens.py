# =============================================================================
# app/auth/tokens.py - Session Tokens
# =============================================================================
# Login issues a signed JWT (python-jose, SECRET_KEY). It travels in an
# httpOnly cookie for the browser client and is also accepted as a Bearer
# token for API clients.
# =============================================================================

import time
from typing import Any

from jose import jwt

from app.config import settings
from app.auth.models import TokenPayload


def create_session_token(user: dict[str, Any], expires_in: int | None = None) -> str:
    """
    Sign a session token for a user row.

    Args:
        user: Row from `users` (id, username, role)
        expires_in: Lifetime in seconds (SESSION_MAX_AGE_SECONDS by default)
    """
    now = int(time.time())
    claims = {
        "sub": str(user["id"]),
        "username": user["username"],
        "role": user["role"],
        "iat": now,
        "exp": now + (expires_in if expires_in is not None else settings.SESSION_MAX_AGE_SECONDS),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_session_token(token: str) -> TokenPayload:
    """
    Verify a session token and return its claims.

    Raises:
        jose.JWTError: If the signature is invalid or the token expired
        pydantic.ValidationError: If required claims are missing
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    return TokenPayload(**payload)
