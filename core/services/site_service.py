# =============================================================================
# core/services/site_service.py - About Us, Contact Info, Contact Form
# =============================================================================

import logging
import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from app.exceptions import BadRequestError
from core.models.site import AboutUsUpdate, ContactInfoUpdate, ContactSubmissionCreate
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

ABOUT_TABLE = "about_us"
CONTACT_TABLE = "contact_info"
SUBMISSIONS_TABLE = "contact_submissions"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class SiteService:
    """
    Service for the editable site pages and the public contact form.

    `about_us` and `contact_info` hold at most one row each; a save updates
    that row or creates it.
    """

    @staticmethod
    def _get_single(table: str) -> dict[str, Any] | None:
        rows = SupabaseClient.fetch_rows(table, limit=1)
        return rows[0] if rows else None

    @staticmethod
    def _upsert_single(table: str, request: BaseModel) -> dict[str, Any]:
        data = request.model_dump()
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        existing = SiteService._get_single(table)
        if existing:
            updated = SupabaseClient.update_rows(table, data, {"id": existing["id"]})
            row = updated[0] if updated else {**existing, **data}
        else:
            row = SupabaseClient.insert_row(table, data)

        logger.info(f"Saved {table} ({row['id']})")
        return row

    @staticmethod
    def get_about() -> dict[str, Any] | None:
        return SiteService._get_single(ABOUT_TABLE)

    @staticmethod
    def save_about(request: AboutUsUpdate) -> dict[str, Any]:
        return SiteService._upsert_single(ABOUT_TABLE, request)

    @staticmethod
    def get_contact() -> dict[str, Any] | None:
        return SiteService._get_single(CONTACT_TABLE)

    @staticmethod
    def save_contact(request: ContactInfoUpdate) -> dict[str, Any]:
        return SiteService._upsert_single(CONTACT_TABLE, request)

    @staticmethod
    def submit_contact(request: ContactSubmissionCreate) -> dict[str, Any]:
        """
        Store a contact form submission.

        Values are trimmed and the email lower-cased before saving.

        Raises:
            BadRequestError: If a field is blank after trimming or the email
                is malformed
        """
        name = request.name.strip()
        email = request.email.strip().lower()
        subject = request.subject.strip()
        message = request.message.strip()

        if not (name and email and subject and message):
            raise BadRequestError("All fields are required", code="MISSING_FIELDS")
        if not EMAIL_PATTERN.match(email):
            raise BadRequestError("Invalid email format", code="INVALID_EMAIL")

        submission = SupabaseClient.insert_row(
            SUBMISSIONS_TABLE,
            {"name": name, "email": email, "subject": subject, "message": message, "status": "new"},
        )
        logger.info(f"Contact submission received: {submission['id']}")
        return submission
