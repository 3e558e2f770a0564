# =============================================================================
# core/models/notification.py - Notification Schemas
# =============================================================================
# Notifications are published by governmental users either to the whole
# country or to a single thana. Citizens see the active ones that reach them,
# each flagged with whether they have read it.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TargetType(str, Enum):
    """Who a notification reaches."""
    THANA = "thana"
    COUNTRYWIDE = "countrywide"


class NotificationCreate(BaseModel):
    """
    Schema for publishing a notification.

    `target_thana` is required when `target_type` is "thana" and ignored
    for countrywide notifications.
    """
    title_bn: str = Field(..., min_length=1, max_length=255)
    title_en: str = Field(..., min_length=1, max_length=255)
    message_bn: str = Field(..., min_length=1)
    message_en: str = Field(..., min_length=1)
    target_type: TargetType
    target_thana: str | None = None


class Notification(BaseModel):
    id: str
    title_bn: str
    title_en: str
    message_bn: str
    message_en: str
    author_id: str
    target_type: TargetType
    target_thana: str | None = None
    is_active: int = 1
    created_at: datetime | None = None


class UserNotification(Notification):
    """Notification as seen by one user."""
    is_read: bool = False


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str
