# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from core.models.user import UserRole


class AuthUser(BaseModel):
    """
    Authenticated user extracted from the session token.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    username: str
    role: UserRole

    @property
    def is_governmental(self) -> bool:
        return self.role == UserRole.GOVERNMENTAL


class TokenPayload(BaseModel):
    """
    Decoded session token.

    Standard JWT claims plus the username and role copied at login.
    """
    sub: str  # User ID
    username: str
    role: UserRole
    exp: int  # Expiration timestamp
    iat: int | None = None  # Issued at timestamp
