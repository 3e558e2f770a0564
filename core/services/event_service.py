# =============================================================================
# core/services/event_service.py - Events & Event Proposals
# =============================================================================
# Read side for approved events, the propose -> approve/reject workflow, and
# deletion. Volunteer / going / helpful toggles go through ActionService.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.config import settings
from app.exceptions import NotFoundError
from core.models.event import EventProposal
from core.services.user_service import UserService, display_name
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

EVENTS_TABLE = "events"
PENDING_EVENTS_TABLE = "pending_events"
TOP_LIMIT = 4

# Columns copied from a pending event into events
EVENT_COLUMNS = (
    "title_bn", "title_en", "description_bn", "description_en", "category",
    "date", "location", "image_url", "volunteers_needed", "proposer_id",
)


class EventService:
    """
    Service for event operations.
    """

    @staticmethod
    def get_event(event_id: str | UUID) -> dict[str, Any]:
        """
        Get an event by ID.

        Raises:
            NotFoundError: If the event doesn't exist
        """
        event_id = normalize_uuid(event_id)
        event = SupabaseClient.fetch_one(EVENTS_TABLE, {"id": event_id})
        if not event:
            raise NotFoundError("Event not found", details={"id": event_id})
        return event

    @staticmethod
    def list_events() -> list[dict[str, Any]]:
        """All events, each with `proposer_name` (None when unknown)."""
        events = SupabaseClient.fetch_rows(EVENTS_TABLE, order_by="date")
        proposers = UserService.get_users([e.get("proposer_id") for e in events])

        for event in events:
            proposer = proposers.get(event.get("proposer_id"))
            event["proposer_name"] = display_name(proposer) if proposer else None
        return events

    @staticmethod
    def top_events(limit: int = TOP_LIMIT) -> list[dict[str, Any]]:
        """Events with the most helpful votes."""
        return SupabaseClient.fetch_rows(
            EVENTS_TABLE, order_by="helpful", desc=True, limit=limit
        )

    @staticmethod
    def delete_event(event_id: str | UUID) -> None:
        event_id = normalize_uuid(event_id)
        SupabaseClient.delete_rows(EVENTS_TABLE, {"id": event_id})
        logger.info(f"Deleted event: {event_id}")

    # -------------------------------------------------------------------------
    # Proposals
    # -------------------------------------------------------------------------

    @staticmethod
    def propose_event(request: EventProposal, proposer_id: str | UUID) -> dict[str, Any]:
        """
        Store a proposed event until a governmental user reviews it.

        `volunteers_needed` is a target shown to users; it never touches the
        volunteers counter, which only counts volunteer records.
        """
        data = request.model_dump()
        data.update(
            image_url=request.image_url or settings.DEFAULT_EVENT_IMAGE_URL,
            proposer_id=normalize_uuid(proposer_id),
        )

        pending = SupabaseClient.insert_row(PENDING_EVENTS_TABLE, data)
        logger.info(f"Event proposed: {pending['id']} by {data['proposer_id']}")
        return pending

    @staticmethod
    def list_pending() -> list[dict[str, Any]]:
        """Pending proposals, newest first."""
        return SupabaseClient.fetch_rows(PENDING_EVENTS_TABLE, order_by="created_at", desc=True)

    @staticmethod
    def approve_pending(pending_id: str | UUID) -> dict[str, Any]:
        """
        Publish a pending event.

        Raises:
            NotFoundError: If the proposal doesn't exist
        """
        pending_id = normalize_uuid(pending_id)
        pending = SupabaseClient.fetch_one(PENDING_EVENTS_TABLE, {"id": pending_id})
        if not pending:
            raise NotFoundError("Not found", details={"id": pending_id})

        data = {column: pending.get(column) for column in EVENT_COLUMNS}
        # Counters start empty; they only move with action records
        data.update(volunteers=0, going=0, helpful=0)
        event = SupabaseClient.insert_row(EVENTS_TABLE, data)
        SupabaseClient.delete_rows(PENDING_EVENTS_TABLE, {"id": pending_id})
        logger.info(f"Approved event proposal {pending_id} as event {event['id']}")
        return event

    @staticmethod
    def delete_pending(pending_id: str | UUID) -> None:
        pending_id = normalize_uuid(pending_id)
        SupabaseClient.delete_rows(PENDING_EVENTS_TABLE, {"id": pending_id})
        logger.info(f"Rejected event proposal {pending_id}")
