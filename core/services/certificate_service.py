# =============================================================================
# core/services/certificate_service.py - Finished Events & Certificates
# =============================================================================
# Participation rows are written by ActionService when a user volunteers for
# or marks "going" to an event. After the event date has passed the user can
# generate a certificate (a flag plus a stable download URL) and download it
# as a PNG rendered on demand.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from app.config import settings
from app.exceptions import BadRequestError, ForbiddenError, NotFoundError
from core.models.participation import certificate_url_for
from core.services.action_service import PARTICIPATION_TABLE
from core.services.event_service import EVENTS_TABLE
from core.services.user_service import USERS_TABLE
from lib.certificate import CertificateData, render_certificate
from lib.supabase_client import SupabaseClient
from lib.utils import filename_slug, is_date_before_today, normalize_uuid

logger = logging.getLogger(__name__)


@dataclass
class RenderedCertificate:
    """PNG bytes plus the suggested download filename."""
    content: bytes
    filename: str


class CertificateService:
    """
    Service for participation certificates.
    """

    @staticmethod
    def finished_events(user_id: str | UUID, today: str | None = None) -> list[dict[str, Any]]:
        """
        Past events the user took part in, latest date first.

        Returns:
            List of {"event": ..., "participation": ...}
        """
        participations = SupabaseClient.fetch_rows(
            PARTICIPATION_TABLE, {"user_id": normalize_uuid(user_id)}
        )
        events = SupabaseClient.fetch_rows(
            EVENTS_TABLE,
            in_filters={"id": sorted({p["event_id"] for p in participations})},
        )
        events_by_id = {e["id"]: e for e in events}

        finished = [
            {"event": events_by_id[p["event_id"]], "participation": p}
            for p in participations
            if p["event_id"] in events_by_id
            and is_date_before_today(events_by_id[p["event_id"]].get("date") or "", today=today)
        ]
        finished.sort(key=lambda item: item["event"].get("date") or "", reverse=True)
        return finished

    @staticmethod
    def _owned_participation(
        participation_id: str,
        user_id: str,
    ) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
        """
        Load a participation with its event and user, checking ownership.

        Raises:
            NotFoundError: If the participation, its event or its user is gone
            ForbiddenError: If the participation belongs to someone else
        """
        participation = SupabaseClient.fetch_one(PARTICIPATION_TABLE, {"id": participation_id})
        event = participation and SupabaseClient.fetch_one(
            EVENTS_TABLE, {"id": participation["event_id"]}
        )
        participant = event and SupabaseClient.fetch_one(
            USERS_TABLE, {"id": participation["user_id"]}
        )
        if not (participation and event and participant):
            raise NotFoundError("Participation not found", details={"id": participation_id})

        if participation["user_id"] != user_id:
            raise ForbiddenError("Access denied")

        return participation, event, participant

    @staticmethod
    def generate(
        participation_id: str | UUID,
        user_id: str | UUID,
        today: str | None = None,
    ) -> tuple[str, str | None]:
        """
        Mark a participation's certificate as generated.

        Returns:
            (message, certificate_url)

        Raises:
            BadRequestError: If the event hasn't finished yet
        """
        participation_id = normalize_uuid(participation_id)
        participation, event, _ = CertificateService._owned_participation(
            participation_id, normalize_uuid(user_id)
        )

        if not is_date_before_today(event.get("date") or "", today=today):
            raise BadRequestError(
                "Certificates are available once the event has finished",
                code="EVENT_NOT_FINISHED",
                details={"event_id": event["id"], "date": event.get("date")},
            )

        if participation.get("certificate_generated"):
            return "Certificate already generated", participation.get("certificate_url")

        url = certificate_url_for(participation_id)
        SupabaseClient.update_rows(
            PARTICIPATION_TABLE,
            {"certificate_generated": 1, "certificate_url": url},
            {"id": participation_id},
        )
        logger.info(f"Certificate generated for participation {participation_id}")
        return "Certificate generated successfully", url

    @staticmethod
    def download(participation_id: str | UUID, user_id: str | UUID) -> RenderedCertificate:
        """
        Render a generated certificate.

        Raises:
            NotFoundError: Participation missing, or certificate not generated
            ForbiddenError: Not the participant
        """
        participation_id = normalize_uuid(participation_id)
        participation, event, participant = CertificateService._owned_participation(
            participation_id, normalize_uuid(user_id)
        )

        if not participation.get("certificate_generated"):
            raise NotFoundError("Certificate not generated", details={"id": participation_id})

        data = CertificateData(
            user_name=f"{participant.get('first_name') or ''} {participant.get('last_name') or ''}".strip(),
            event_name=event.get("title_en") or "",
            event_date=event.get("date") or "",
            event_location=event.get("location") or "",
            participation_type=participation.get("participation_type") or "",
        )
        content = render_certificate(
            data,
            template_path=settings.CERTIFICATE_TEMPLATE_PATH,
            font_path=settings.CERTIFICATE_FONT_PATH,
            bold_font_path=settings.CERTIFICATE_BOLD_FONT_PATH,
        )
        return RenderedCertificate(
            content=content,
            filename=f"certificate-{filename_slug(data.event_name)}.png",
        )
