# =============================================================================
# app/routers/approvals.py - Registration Approval Endpoints
# =============================================================================
# Governmental users review pending registrations. Approving moves the row
# into `users`; rejecting deletes it.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import GovernmentUser
from core.models.notification import MessageResponse
from core.models.user import PendingRegistration
from core.services.user_service import UserService

router = APIRouter()

PendingId = Annotated[UUID, Path(description="Pending registration UUID")]


@router.get("", response_model=list[PendingRegistration])
async def list_pending_registrations(user: GovernmentUser):
    """Pending registrations, oldest first."""
    return UserService.list_pending()


@router.post("/{pending_id}/approve", response_model=MessageResponse)
async def approve_registration(pending_id: PendingId, user: GovernmentUser):
    """
    Approve a registration.

    Raises:
        404: Registration doesn't exist
        409: Email, mobile or ID number now belongs to another user
    """
    UserService.approve(pending_id)
    return MessageResponse(message="Approved")


@router.delete("/{pending_id}", response_model=MessageResponse)
async def reject_registration(pending_id: PendingId, user: GovernmentUser):
    UserService.reject(pending_id)
    return MessageResponse(message="Deleted")
