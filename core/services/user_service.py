# =============================================================================
# core/services/user_service.py - Accounts & Registration Approval
# =============================================================================
# Handles registration (into pending_approvals), credential checks, profile
# lookup and the governmental approve / reject workflow.
#
# Approval moves a row from `pending_approvals` to `users`; there is no
# intermediate state.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import (
    DuplicateRegistrationError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
)
from core.models.user import RegistrationRequest, UserRole
from lib.passwords import hash_password, verify_password
from lib.supabase_client import SupabaseClient, UniqueViolationError
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
PENDING_TABLE = "pending_approvals"

# (column, message) checked in order on register and approve
UNIQUE_FIELDS: list[tuple[str, str]] = [
    ("username", "Email already exists"),
    ("mobile", "Mobile already exists"),
    ("id_number", "ID number already exists"),
]

# Columns copied from a pending registration into users
USER_COLUMNS = (
    "username", "password", "role", "first_name", "last_name", "id_type",
    "id_number", "building", "floor", "street", "thana", "city",
    "postal_code", "country", "mobile",
)


def _without_password(row: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in row.items() if k != "password"}


def display_name(user: dict[str, Any]) -> str:
    """First + last name, falling back to the username."""
    full = f"{user.get('first_name') or ''} {user.get('last_name') or ''}".strip()
    return full or user.get("username", "")


class UserService:
    """
    Service for account operations.
    """

    @staticmethod
    def register(request: RegistrationRequest) -> dict[str, Any]:
        """
        Submit a registration for approval.

        Email, mobile and ID number must be unused across both users and
        pending registrations.

        Returns:
            The stored pending registration (without password)

        Raises:
            DuplicateRegistrationError: If any unique field is taken
        """
        data = request.model_dump()
        for column, message in UNIQUE_FIELDS:
            value = data[column]
            if SupabaseClient.exists(USERS_TABLE, {column: value}) or SupabaseClient.exists(
                PENDING_TABLE, {column: value}
            ):
                raise DuplicateRegistrationError(message, column)

        data["password"] = hash_password(request.password)
        data["role"] = request.role.value
        data["id_type"] = request.id_type.value

        try:
            pending = SupabaseClient.insert_row(PENDING_TABLE, data)
        except UniqueViolationError:
            raise DuplicateRegistrationError("Duplicate value", "username")

        logger.info(f"Registration submitted for approval: {pending['id']}")
        return _without_password(pending)

    @staticmethod
    def authenticate(
        username: str,
        password: str,
        role: UserRole | None = None,
    ) -> dict[str, Any]:
        """
        Check credentials.

        Args:
            username: Email address
            password: Plain-text password
            role: Role the login form was submitted under, if any

        Returns:
            The user row (without password)

        Raises:
            InvalidCredentialsError: Unknown user or wrong password
            ForbiddenError: Account role differs from the requested role
        """
        user = SupabaseClient.fetch_one(USERS_TABLE, {"username": username})
        if not user or not verify_password(password, user.get("password") or ""):
            logger.info(f"Failed login for {username}")
            raise InvalidCredentialsError()

        if role and user.get("role") and role.value != user["role"]:
            raise ForbiddenError("Invalid role for this account")

        return _without_password(user)

    @staticmethod
    def get_user(user_id: str | UUID) -> dict[str, Any] | None:
        """Fetch a user (without password), or None."""
        user = SupabaseClient.fetch_one(USERS_TABLE, {"id": normalize_uuid(user_id)})
        return _without_password(user) if user else None

    @staticmethod
    def get_users(user_ids: list[str]) -> dict[str, dict[str, Any]]:
        """Fetch several users keyed by id (missing ids are simply absent)."""
        unique_ids = sorted({uid for uid in user_ids if uid})
        rows = SupabaseClient.fetch_rows(
            USERS_TABLE,
            in_filters={"id": unique_ids},
            columns="id, username, first_name, last_name",
        )
        return {row["id"]: _without_password(row) for row in rows}

    @staticmethod
    def author_summaries(user_ids: list[str]) -> dict[str, dict[str, Any]]:
        """Map user id -> {username, first_name, last_name} for display."""
        return {
            uid: {
                "username": row["username"],
                "first_name": row.get("first_name"),
                "last_name": row.get("last_name"),
            }
            for uid, row in UserService.get_users(user_ids).items()
        }

    # -------------------------------------------------------------------------
    # Approval workflow (governmental)
    # -------------------------------------------------------------------------

    @staticmethod
    def list_pending() -> list[dict[str, Any]]:
        """Pending registrations, oldest first."""
        rows = SupabaseClient.fetch_rows(PENDING_TABLE, order_by="created_at")
        return [_without_password(row) for row in rows]

    @staticmethod
    def approve(pending_id: str | UUID) -> dict[str, Any]:
        """
        Move a pending registration into users.

        Raises:
            NotFoundError: If the registration doesn't exist
            DuplicateRegistrationError: If a user took the email/mobile/ID since
        """
        pending_id = normalize_uuid(pending_id)
        pending = SupabaseClient.fetch_one(PENDING_TABLE, {"id": pending_id})
        if not pending:
            raise NotFoundError("Not found", details={"id": pending_id})

        for column, message in UNIQUE_FIELDS:
            if SupabaseClient.exists(USERS_TABLE, {column: pending[column]}):
                raise DuplicateRegistrationError(message, column)

        user_data = {column: pending.get(column) for column in USER_COLUMNS}
        try:
            user = SupabaseClient.insert_row(USERS_TABLE, user_data)
        except UniqueViolationError:
            raise DuplicateRegistrationError("Email already exists", "username")

        SupabaseClient.delete_rows(PENDING_TABLE, {"id": pending_id})
        logger.info(f"Approved registration {pending_id} as user {user['id']}")
        return _without_password(user)

    @staticmethod
    def reject(pending_id: str | UUID) -> None:
        """Delete a pending registration (no error if already gone)."""
        pending_id = normalize_uuid(pending_id)
        SupabaseClient.delete_rows(PENDING_TABLE, {"id": pending_id})
        logger.info(f"Rejected registration {pending_id}")
