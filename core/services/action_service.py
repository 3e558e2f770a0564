# =============================================================================
# core/services/action_service.py - Once-per-user Action Toggles
# =============================================================================
# One implementation of "do / undo / status" shared by project votes, poll
# votes, event volunteer / going / helpful and thread likes.
#
# Consistency rules:
# - The record table has a unique (target, user) constraint, so a second Do
#   fails even when two requests race past the existence pre-check.
# - The counter is only ever changed through SupabaseClient.adjust_counter,
#   which runs `counter = counter + delta` inside the database.
# - If the counter update fails after the record write, the record write is
#   reverted so counter == count(records) still holds.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import (
    ActionNotFoundError,
    AlreadyActedError,
    EventEndedError,
    NotFoundError,
    UnauthorizedError,
)
from core.models.action import ActionKind, ActionSpec, get_action_spec
from lib.supabase_client import SupabaseClient, SupabaseClientError, UniqueViolationError
from lib.utils import is_date_before_today, normalize_uuid

logger = logging.getLogger(__name__)

PARTICIPATION_TABLE = "event_participation"


class ActionService:
    """
    Service for once-per-user actions on projects, events and threads.

    Each (target, user, kind) is a two-state machine:
        not acted --perform--> acted --revoke--> not acted
    """

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _record_filters(spec: ActionSpec, target_id: str, user_id: str) -> dict[str, Any]:
        return {spec.target_column: target_id, "user_id": user_id}

    @staticmethod
    def _participation_filters(spec: ActionSpec, target_id: str, user_id: str) -> dict[str, Any]:
        return {
            "event_id": target_id,
            "user_id": user_id,
            "participation_type": spec.participation_type.value,
        }

    @staticmethod
    def get_target(spec: ActionSpec, target_id: str) -> dict[str, Any]:
        """Fetch the row being acted on, or raise 404."""
        target = SupabaseClient.fetch_one(spec.target_table, {"id": target_id})
        if not target:
            raise NotFoundError(
                f"{spec.target_label} not found",
                details={"id": target_id},
            )
        return target

    @staticmethod
    def ensure_event_open(event: dict[str, Any], today: str | None = None) -> None:
        """
        Raise EventEndedError if the event's date is before today.

        Raises:
            EventEndedError: If the event has ended
        """
        if is_date_before_today(event.get("date") or "", today=today):
            raise EventEndedError(str(event["id"]), event.get("date") or "")

    # -------------------------------------------------------------------------
    # Do
    # -------------------------------------------------------------------------

    @staticmethod
    def perform(
        kind: ActionKind,
        target_id: str | UUID,
        user_id: str | UUID | None,
        today: str | None = None,
    ) -> dict[str, Any] | None:
        """
        Record that a user performed an action and bump the counter.

        For event volunteer/going the "event has ended" check runs before the
        login check, so a past event always answers 400.

        Args:
            kind: Which action
            target_id: Project / event / thread id
            user_id: Acting user, or None when anonymous
            today: Override for today's YYYY-MM-DD (tests)

        Returns:
            The target row after the increment

        Raises:
            UnauthorizedError: If user_id is None
            NotFoundError: If the target doesn't exist
            EventEndedError: If joining an event that has ended
            AlreadyActedError: If the user already performed this action
        """
        spec = get_action_spec(kind)
        target_id = normalize_uuid(target_id)

        if user_id is None and not spec.requires_open_event:
            raise UnauthorizedError()

        target = ActionService.get_target(spec, target_id)

        if spec.requires_open_event:
            ActionService.ensure_event_open(target, today=today)

        if user_id is None:
            raise UnauthorizedError()
        user_id = normalize_uuid(user_id)

        record_filters = ActionService._record_filters(spec, target_id, user_id)

        if SupabaseClient.exists(spec.record_table, record_filters):
            raise AlreadyActedError(spec.already_message, kind.value, target_id)

        try:
            record = SupabaseClient.insert_row(spec.record_table, record_filters)
        except UniqueViolationError:
            # Lost the race against a concurrent identical request
            raise AlreadyActedError(spec.already_message, kind.value, target_id)

        participation = None
        try:
            if spec.participation_type:
                participation = SupabaseClient.insert_row(
                    PARTICIPATION_TABLE,
                    ActionService._participation_filters(spec, target_id, user_id),
                )
            updated = SupabaseClient.adjust_counter(spec.target_table, spec.counter, target_id, 1)
        except SupabaseClientError as e:
            logger.error(f"Failed to apply {kind.value} on {target_id}, reverting record: {e}")
            SupabaseClient.delete_rows(spec.record_table, {"id": record["id"]})
            if participation:
                SupabaseClient.delete_rows(PARTICIPATION_TABLE, {"id": participation["id"]})
            raise

        logger.info(f"Recorded {kind.value} on {target_id} by {user_id}")
        return updated

    # -------------------------------------------------------------------------
    # Undo
    # -------------------------------------------------------------------------

    @staticmethod
    def revoke(
        kind: ActionKind,
        target_id: str | UUID,
        user_id: str | UUID | None,
        today: str | None = None,
    ) -> dict[str, Any] | None:
        """
        Remove a user's action and decrement the counter.

        Leaving an event (unvolunteer / not going) is only possible while the
        event is open: after it ends the participation row backs the user's
        certificate and stays. As with perform, the ended check comes first.

        Returns:
            The target row after the decrement (None if the target is gone)

        Raises:
            UnauthorizedError: If user_id is None
            NotFoundError: If leaving an event that doesn't exist
            EventEndedError: If leaving an event that has ended
            ActionNotFoundError: If the user never performed this action
        """
        spec = get_action_spec(kind)
        target_id = normalize_uuid(target_id)

        if spec.requires_open_event:
            event = ActionService.get_target(spec, target_id)
            ActionService.ensure_event_open(event, today=today)

        if user_id is None:
            raise UnauthorizedError()
        user_id = normalize_uuid(user_id)
        record_filters = ActionService._record_filters(spec, target_id, user_id)

        deleted = SupabaseClient.delete_rows(spec.record_table, record_filters)
        if not deleted:
            raise ActionNotFoundError(spec.missing_message, kind.value, target_id)

        removed_participation: list[dict[str, Any]] = []
        try:
            if spec.participation_type:
                removed_participation = SupabaseClient.delete_rows(
                    PARTICIPATION_TABLE,
                    ActionService._participation_filters(spec, target_id, user_id),
                )
            updated = SupabaseClient.adjust_counter(spec.target_table, spec.counter, target_id, -1)
        except SupabaseClientError as e:
            logger.error(f"Failed to revoke {kind.value} on {target_id}, restoring record: {e}")
            SupabaseClient.insert_rows(spec.record_table, deleted)
            SupabaseClient.insert_rows(PARTICIPATION_TABLE, removed_participation)
            raise

        logger.info(f"Revoked {kind.value} on {target_id} by {user_id}")
        return updated

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    @staticmethod
    def has_acted(
        kind: ActionKind,
        target_id: str | UUID,
        user_id: str | UUID | None,
    ) -> bool:
        """Check whether the user has performed the action (False when anonymous)."""
        if user_id is None:
            return False
        spec = get_action_spec(kind)
        return SupabaseClient.exists(
            spec.record_table,
            ActionService._record_filters(spec, normalize_uuid(target_id), normalize_uuid(user_id)),
        )

    @staticmethod
    def status(
        kinds: list[ActionKind],
        target_id: str | UUID,
        user_id: str | UUID | None,
    ) -> dict[ActionKind, bool]:
        """has_acted for several kinds at once."""
        return {kind: ActionService.has_acted(kind, target_id, user_id) for kind in kinds}

    @staticmethod
    def count_records(kind: ActionKind, target_id: str | UUID) -> int:
        """Number of record rows for a target; equals its counter."""
        spec = get_action_spec(kind)
        rows = SupabaseClient.fetch_rows(
            spec.record_table,
            {spec.target_column: normalize_uuid(target_id)},
            columns="id",
        )
        return len(rows)
