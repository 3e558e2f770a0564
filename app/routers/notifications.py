# =============================================================================
# app/routers/notifications.py - Notification Endpoints
# =============================================================================
# Citizens read the notifications reaching their thana (plus countrywide
# ones); governmental users publish and deactivate them.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status

from app.dependencies import CurrentUser, GovernmentUser
from core.models.notification import (
    MessageResponse,
    Notification,
    NotificationCreate,
    UserNotification,
)
from core.services.notification_service import NotificationService

router = APIRouter()

NotificationId = Annotated[UUID, Path(description="Notification UUID")]


@router.get("", response_model=list[UserNotification])
async def my_notifications(user: CurrentUser):
    """Active notifications for the caller's thana and the whole country."""
    return NotificationService.list_for_user(user.id)


@router.get("/admin", response_model=list[Notification])
async def all_notifications(user: GovernmentUser):
    return NotificationService.list_all()


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(request: NotificationCreate, user: GovernmentUser):
    """
    Publish a notification.

    `target_thana` is required for thana notifications and dropped for
    countrywide ones.
    """
    return NotificationService.create(request, user.id)


@router.post("/read-all", response_model=MessageResponse)
async def mark_all_read(user: CurrentUser):
    NotificationService.mark_all_read(user.id)
    return MessageResponse(message="All notifications marked as read")


@router.post("/{notification_id}/read", response_model=MessageResponse)
async def mark_read(notification_id: NotificationId, user: CurrentUser):
    """Mark one notification read; calling it again is harmless."""
    return MessageResponse(message=NotificationService.mark_read(notification_id, user.id))


@router.patch("/{notification_id}/deactivate", response_model=MessageResponse)
async def deactivate_notification(notification_id: NotificationId, user: GovernmentUser):
    NotificationService.deactivate(notification_id)
    return MessageResponse(message="Notification deactivated")
