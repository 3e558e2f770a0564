# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers as annotated parameters:
#
#   async def upvote(project_id: UUID, user: OptionalUser): ...
# =============================================================================

from typing import Annotated, Optional

from fastapi import Depends

from app.auth.dependencies import (
    get_current_user,
    get_current_user_optional,
    require_governmental,
)
from app.auth.models import AuthUser


# Type aliases for dependency injection
CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
OptionalUser = Annotated[Optional[AuthUser], Depends(get_current_user_optional)]
GovernmentUser = Annotated[AuthUser, Depends(require_governmental)]


def user_id_of(user: Optional[AuthUser]) -> Optional[str]:
    """The user's id as a string, or None when anonymous."""
    return str(user.id) if user else None
