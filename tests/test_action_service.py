# =============================================================================
# tests/test_action_service.py - Once-per-user Action Tests
# =============================================================================
# Unit tests for ActionService against the in-memory database:
# - Do / Undo / Status for every action kind
# - counter == number of records after every operation
# - Conflict on repeat, NotFound on missing undo, 401 when anonymous
# - Ended events reject volunteer / going with 400, even anonymously
# - Failed counter updates leave no orphaned records
#
# Run with: pytest tests/test_action_service.py -v
# =============================================================================

import pytest

from app.exceptions import (
    ActionNotFoundError,
    AlreadyActedError,
    EventEndedError,
    NotFoundError,
    UnauthorizedError,
)
from core.models.action import ACTIONS, ActionKind, get_action_spec
from core.services.action_service import PARTICIPATION_TABLE, ActionService
from lib.supabase_client import SupabaseClientError

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def counter_of(fake_db, kind: ActionKind, target_id: str) -> int:
    spec = get_action_spec(kind)
    return fake_db.get(spec.target_table, target_id)[spec.counter]


# =============================================================================
# Project votes
# =============================================================================

class TestProjectVote:
    """The upvote scenario: P starts at 5 upvotes."""

    def test_upvote_increments_counter(self, fake_db, project, citizen):
        """A first upvote takes the project from 5 to 6."""
        updated = ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert updated["upvotes"] == 6
        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 6
        assert len(fake_db.rows("project_votes")) == 1

    def test_repeat_upvote_conflicts_and_keeps_counter(self, fake_db, project, citizen):
        ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        with pytest.raises(AlreadyActedError) as exc_info:
            ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Already voted"
        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 6

    def test_unvote_restores_counter(self, fake_db, project, citizen):
        ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        updated = ActionService.revoke(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert updated["upvotes"] == 5
        assert fake_db.rows("project_votes") == []

    def test_second_unvote_is_not_found(self, fake_db, project, citizen):
        ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])
        ActionService.revoke(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        with pytest.raises(ActionNotFoundError) as exc_info:
            ActionService.revoke(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Vote not found"
        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 5

    def test_anonymous_upvote_is_unauthorized(self, fake_db, project):
        with pytest.raises(UnauthorizedError):
            ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], None)

        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 5

    def test_anonymous_unvote_is_unauthorized(self, fake_db, project):
        with pytest.raises(UnauthorizedError):
            ActionService.revoke(ActionKind.PROJECT_VOTE, project["id"], None)

    def test_missing_project_is_not_found(self, fake_db, citizen):
        with pytest.raises(NotFoundError) as exc_info:
            ActionService.perform(ActionKind.PROJECT_VOTE, MISSING_ID, citizen["id"])

        assert exc_info.value.message == "Project not found"
        assert fake_db.rows("project_votes") == []

    def test_votes_from_different_users_accumulate(self, fake_db, project, citizen, other_citizen):
        ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])
        updated = ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], other_citizen["id"])

        assert updated["upvotes"] == 7
        assert ActionService.count_records(ActionKind.PROJECT_VOTE, project["id"]) == 2

    def test_unique_constraint_catches_race(self, fake_db, project, citizen, monkeypatch):
        """If the pre-check misses a concurrent vote, the constraint still answers 409."""
        fake_db.add("project_votes", {"project_id": project["id"], "user_id": citizen["id"]})
        monkeypatch.setattr(
            "core.services.action_service.SupabaseClient.exists",
            classmethod(lambda cls, table, filters: False),
        )

        with pytest.raises(AlreadyActedError):
            ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 5
        assert len(fake_db.rows("project_votes")) == 1


# =============================================================================
# Counter / record invariant across all kinds
# =============================================================================

class TestCounterMatchesRecords:
    """counter(T) == count(records for T) after Do and Undo, for every kind."""

    @pytest.fixture
    def targets(self, upcoming_event, thread, fake_db):
        project = fake_db.add("projects", {
            "title_bn": "প", "title_en": "P", "description_bn": "d", "description_en": "d",
            "category": "c", "budget": "b", "status": "Active", "image_url": "u", "upvotes": 0,
        })
        return {
            "projects": project["id"],
            "events": upcoming_event["id"],
            "threads": thread["id"],
        }

    @pytest.mark.parametrize("kind", list(ActionKind))
    def test_do_then_undo(self, fake_db, targets, citizen, other_citizen, kind):
        spec = ACTIONS[kind]
        target_id = targets[spec.target_table]

        ActionService.perform(kind, target_id, citizen["id"])
        ActionService.perform(kind, target_id, other_citizen["id"])
        assert counter_of(fake_db, kind, target_id) == 2
        assert ActionService.count_records(kind, target_id) == 2

        ActionService.revoke(kind, target_id, citizen["id"])
        assert counter_of(fake_db, kind, target_id) == 1
        assert ActionService.count_records(kind, target_id) == 1

        with pytest.raises(AlreadyActedError):
            ActionService.perform(kind, target_id, other_citizen["id"])
        assert counter_of(fake_db, kind, target_id) == 1

    @pytest.mark.parametrize("kind", list(ActionKind))
    def test_status_reflects_records(self, fake_db, targets, citizen, kind):
        target_id = targets[ACTIONS[kind].target_table]

        assert ActionService.has_acted(kind, target_id, citizen["id"]) is False
        ActionService.perform(kind, target_id, citizen["id"])
        assert ActionService.has_acted(kind, target_id, citizen["id"]) is True
        assert ActionService.has_acted(kind, target_id, None) is False


# =============================================================================
# Events
# =============================================================================

class TestEventParticipation:
    """Volunteer / going on open and ended events."""

    @pytest.mark.parametrize("kind", [ActionKind.EVENT_VOLUNTEER, ActionKind.EVENT_GOING])
    def test_ended_event_rejects_participation(self, fake_db, past_event, citizen, kind):
        with pytest.raises(EventEndedError) as exc_info:
            ActionService.perform(kind, past_event["id"], citizen["id"])

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "This event has ended. Participation is no longer available."
        assert counter_of(fake_db, kind, past_event["id"]) == 0

    @pytest.mark.parametrize("kind", [ActionKind.EVENT_VOLUNTEER, ActionKind.EVENT_GOING])
    def test_ended_event_rejects_anonymous_with_bad_request(self, fake_db, past_event, kind):
        """The ended check runs before the login check."""
        with pytest.raises(EventEndedError):
            ActionService.perform(kind, past_event["id"], None)

    def test_ended_event_rejects_even_after_prior_volunteering(self, fake_db, citizen):
        event = fake_db.add("events", {
            "title_bn": "ই", "title_en": "E", "description_bn": "d", "description_en": "d",
            "category": "c", "date": "2025-06-01", "location": "Dhaka", "image_url": "u",
        })
        ActionService.perform(ActionKind.EVENT_VOLUNTEER, event["id"], citizen["id"], today="2025-05-01")

        with pytest.raises(EventEndedError):
            ActionService.perform(ActionKind.EVENT_VOLUNTEER, event["id"], citizen["id"], today="2025-06-02")

    def test_event_on_today_is_still_open(self, fake_db, citizen):
        event = fake_db.add("events", {
            "title_bn": "ই", "title_en": "E", "description_bn": "d", "description_en": "d",
            "category": "c", "date": "2025-06-01", "location": "Dhaka", "image_url": "u",
        })

        updated = ActionService.perform(
            ActionKind.EVENT_GOING, event["id"], citizen["id"], today="2025-06-01"
        )

        assert updated["going"] == 1

    def test_helpful_allowed_on_ended_event(self, fake_db, past_event, citizen):
        updated = ActionService.perform(ActionKind.EVENT_HELPFUL, past_event["id"], citizen["id"])

        assert updated["helpful"] == 1

    def test_anonymous_volunteer_on_open_event_is_unauthorized(self, fake_db, upcoming_event):
        with pytest.raises(UnauthorizedError):
            ActionService.perform(ActionKind.EVENT_VOLUNTEER, upcoming_event["id"], None)

    def test_volunteer_records_participation(self, fake_db, upcoming_event, citizen):
        ActionService.perform(ActionKind.EVENT_VOLUNTEER, upcoming_event["id"], citizen["id"])

        participation = fake_db.rows(PARTICIPATION_TABLE)
        assert len(participation) == 1
        assert participation[0]["participation_type"] == "volunteer"
        assert participation[0]["user_id"] == citizen["id"]

    def test_unvolunteer_removes_participation(self, fake_db, upcoming_event, citizen):
        ActionService.perform(ActionKind.EVENT_VOLUNTEER, upcoming_event["id"], citizen["id"])
        ActionService.perform(ActionKind.EVENT_GOING, upcoming_event["id"], citizen["id"])

        ActionService.revoke(ActionKind.EVENT_VOLUNTEER, upcoming_event["id"], citizen["id"])

        remaining = fake_db.rows(PARTICIPATION_TABLE)
        assert [p["participation_type"] for p in remaining] == ["going"]

    @pytest.mark.parametrize("kind", [ActionKind.EVENT_VOLUNTEER, ActionKind.EVENT_GOING])
    def test_leaving_ended_event_is_rejected(self, fake_db, citizen, kind):
        event = fake_db.add("events", {
            "title_bn": "ই", "title_en": "E", "description_bn": "d", "description_en": "d",
            "category": "c", "date": "2025-06-01", "location": "Dhaka", "image_url": "u",
        })
        ActionService.perform(kind, event["id"], citizen["id"], today="2025-05-01")

        with pytest.raises(EventEndedError):
            ActionService.revoke(kind, event["id"], citizen["id"], today="2025-06-02")

        assert counter_of(fake_db, kind, event["id"]) == 1
        assert ActionService.count_records(kind, event["id"]) == 1
        assert len(fake_db.rows(PARTICIPATION_TABLE)) == 1

    def test_leaving_ended_event_anonymously_is_bad_request(self, fake_db, past_event):
        with pytest.raises(EventEndedError):
            ActionService.revoke(ActionKind.EVENT_VOLUNTEER, past_event["id"], None)

    def test_unhelpful_allowed_on_ended_event(self, fake_db, past_event, citizen):
        ActionService.perform(ActionKind.EVENT_HELPFUL, past_event["id"], citizen["id"])

        updated = ActionService.revoke(ActionKind.EVENT_HELPFUL, past_event["id"], citizen["id"])

        assert updated["helpful"] == 0

    def test_helpful_records_no_participation(self, fake_db, upcoming_event, citizen):
        ActionService.perform(ActionKind.EVENT_HELPFUL, upcoming_event["id"], citizen["id"])

        assert fake_db.rows(PARTICIPATION_TABLE) == []

    def test_status_for_several_kinds(self, fake_db, upcoming_event, citizen):
        ActionService.perform(ActionKind.EVENT_GOING, upcoming_event["id"], citizen["id"])

        flags = ActionService.status(
            [ActionKind.EVENT_VOLUNTEER, ActionKind.EVENT_GOING, ActionKind.EVENT_HELPFUL],
            upcoming_event["id"],
            citizen["id"],
        )

        assert flags == {
            ActionKind.EVENT_VOLUNTEER: False,
            ActionKind.EVENT_GOING: True,
            ActionKind.EVENT_HELPFUL: False,
        }


# =============================================================================
# Failure handling
# =============================================================================

class TestCounterFailure:
    """A failed counter update must not leave records behind."""

    def test_failed_increment_reverts_record(self, fake_db, project, citizen):
        fake_db.fail_rpc = True

        with pytest.raises(SupabaseClientError):
            ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert fake_db.rows("project_votes") == []
        assert counter_of(fake_db, ActionKind.PROJECT_VOTE, project["id"]) == 5

    def test_failed_increment_reverts_participation(self, fake_db, upcoming_event, citizen):
        fake_db.fail_rpc = True

        with pytest.raises(SupabaseClientError):
            ActionService.perform(ActionKind.EVENT_VOLUNTEER, upcoming_event["id"], citizen["id"])

        assert fake_db.rows("event_volunteers") == []
        assert fake_db.rows(PARTICIPATION_TABLE) == []

    def test_failed_decrement_restores_record(self, fake_db, upcoming_event, citizen):
        ActionService.perform(ActionKind.EVENT_GOING, upcoming_event["id"], citizen["id"])
        fake_db.fail_rpc = True

        with pytest.raises(SupabaseClientError):
            ActionService.revoke(ActionKind.EVENT_GOING, upcoming_event["id"], citizen["id"])

        assert len(fake_db.rows("event_goings")) == 1
        assert len(fake_db.rows(PARTICIPATION_TABLE)) == 1
        assert counter_of(fake_db, ActionKind.EVENT_GOING, upcoming_event["id"]) == 1

    def test_counter_updated_in_database(self, fake_db, project, citizen):
        ActionService.perform(ActionKind.PROJECT_VOTE, project["id"], citizen["id"])

        assert fake_db.rpc_calls == [(
            "adjust_counter",
            {"target_table": "projects", "counter_column": "upvotes", "row_id": project["id"], "delta": 1},
        )]
