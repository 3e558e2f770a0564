# =============================================================================
# core/services/notification_service.py - Targeted Notifications
# =============================================================================
# A notification reaches a user when it is active and either countrywide or
# aimed at the user's thana. Read state lives in `notification_reads`, one
# row per (notification, user).
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import BadRequestError, NotFoundError
from core.models.notification import NotificationCreate, TargetType
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient, UniqueViolationError
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

NOTIFICATIONS_TABLE = "notifications"
READS_TABLE = "notification_reads"


def _reaches(notification: dict[str, Any], thana: str | None) -> bool:
    if notification.get("target_type") == TargetType.COUNTRYWIDE.value:
        return True
    return thana is not None and notification.get("target_thana") == thana


class NotificationService:
    """
    Service for notification operations.
    """

    @staticmethod
    def visible_to(user_id: str | UUID) -> list[dict[str, Any]]:
        """Active notifications reaching the user, newest first (no read flag)."""
        user = UserService.get_user(user_id)
        thana = user.get("thana") if user else None

        active = SupabaseClient.fetch_rows(
            NOTIFICATIONS_TABLE, {"is_active": 1}, order_by="created_at", desc=True
        )
        return [n for n in active if _reaches(n, thana)]

    @staticmethod
    def _read_ids(user_id: str, notification_ids: list[str]) -> set[str]:
        rows = SupabaseClient.fetch_rows(
            READS_TABLE,
            {"user_id": user_id},
            in_filters={"notification_id": notification_ids},
            columns="notification_id",
        )
        return {row["notification_id"] for row in rows}

    @staticmethod
    def list_for_user(user_id: str | UUID) -> list[dict[str, Any]]:
        """Notifications reaching the user, each with `is_read`."""
        user_id = normalize_uuid(user_id)
        notifications = NotificationService.visible_to(user_id)
        read = NotificationService._read_ids(user_id, [n["id"] for n in notifications])

        for notification in notifications:
            notification["is_read"] = notification["id"] in read
        return notifications

    @staticmethod
    def list_all() -> list[dict[str, Any]]:
        """Every notification, newest first (management view)."""
        return SupabaseClient.fetch_rows(NOTIFICATIONS_TABLE, order_by="created_at", desc=True)

    @staticmethod
    def create(request: NotificationCreate, author_id: str | UUID) -> dict[str, Any]:
        """
        Publish a notification.

        Raises:
            BadRequestError: If a thana notification has no target thana
        """
        target_thana = request.target_thana
        if request.target_type == TargetType.THANA:
            if not target_thana:
                raise BadRequestError(
                    "Target thana required for thana-specific notifications",
                    code="TARGET_THANA_REQUIRED",
                )
        else:
            target_thana = None

        data = request.model_dump()
        data.update(
            target_type=request.target_type.value,
            target_thana=target_thana,
            author_id=normalize_uuid(author_id),
            is_active=1,
        )
        notification = SupabaseClient.insert_row(NOTIFICATIONS_TABLE, data)
        logger.info(f"Published {data['target_type']} notification: {notification['id']}")
        return notification

    @staticmethod
    def mark_read(notification_id: str | UUID, user_id: str | UUID) -> str:
        """
        Mark one notification as read; repeating it is harmless.

        Returns:
            "Marked as read" or "Already read"
        """
        filters = {
            "notification_id": normalize_uuid(notification_id),
            "user_id": normalize_uuid(user_id),
        }
        if SupabaseClient.exists(READS_TABLE, filters):
            return "Already read"

        try:
            SupabaseClient.insert_row(READS_TABLE, filters)
        except UniqueViolationError:
            return "Already read"
        return "Marked as read"

    @staticmethod
    def mark_all_read(user_id: str | UUID) -> int:
        """
        Mark every visible unread notification as read.

        Returns:
            Number of notifications newly marked
        """
        user_id = normalize_uuid(user_id)
        visible_ids = [n["id"] for n in NotificationService.visible_to(user_id)]
        read = NotificationService._read_ids(user_id, visible_ids)
        unread = [nid for nid in visible_ids if nid not in read]

        SupabaseClient.insert_rows(
            READS_TABLE, [{"notification_id": nid, "user_id": user_id} for nid in unread]
        )
        logger.info(f"Marked {len(unread)} notifications read for {user_id}")
        return len(unread)

    @staticmethod
    def deactivate(notification_id: str | UUID) -> dict[str, Any]:
        """
        Hide a notification from users.

        Raises:
            NotFoundError: If the notification doesn't exist
        """
        notification_id = normalize_uuid(notification_id)
        updated = SupabaseClient.update_rows(
            NOTIFICATIONS_TABLE, {"is_active": 0}, {"id": notification_id}
        )
        if not updated:
            raise NotFoundError("Notification not found", details={"id": notification_id})
        logger.info(f"Deactivated notification: {notification_id}")
        return updated[0]
