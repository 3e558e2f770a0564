# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Local accounts with signed session tokens (cookie or Bearer).
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import (
    get_current_user,
    get_current_user_optional,
    require_governmental,
)
from app.auth.models import AuthUser, TokenPayload
from app.auth.tokens import create_session_token, decode_session_token

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "require_governmental",
    "AuthUser",
    "TokenPayload",
    "create_session_token",
    "decode_session_token",
]
