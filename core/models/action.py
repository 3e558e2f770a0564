# =============================================================================
# core/models/action.py - Once-per-user Action Definitions
# =============================================================================
# Every "vote-like" toggle in the platform follows the same shape:
#
#   target table (projects, events, threads) with an integer counter
#   + record table with one row per (target, user)
#
# ACTIONS maps each ActionKind to the tables and column names it uses, so a
# single service can implement Do / Undo / Status for all of them.
#
# Invariant kept by ActionService:
#   target.counter == count(record rows for that target)
# =============================================================================

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


class ActionKind(str, Enum):
    """
    Togglable per-user actions.

    Poll votes are project votes (polls are the top projects), so there is
    no separate poll kind.
    """
    PROJECT_VOTE = "project_vote"
    EVENT_VOLUNTEER = "event_volunteer"
    EVENT_GOING = "event_going"
    EVENT_HELPFUL = "event_helpful"
    THREAD_LIKE = "thread_like"


class ParticipationType(str, Enum):
    """How a user took part in an event (drives certificates)."""
    VOLUNTEER = "volunteer"
    GOING = "going"


@dataclass(frozen=True)
class ActionSpec:
    """Storage layout and messages for one ActionKind."""
    kind: ActionKind
    target_table: str
    target_label: str
    record_table: str
    target_column: str
    counter: str
    already_message: str
    missing_message: str
    # Only events that haven't ended can be joined
    requires_open_event: bool = False
    participation_type: ParticipationType | None = None


ACTIONS: dict[ActionKind, ActionSpec] = {
    ActionKind.PROJECT_VOTE: ActionSpec(
        kind=ActionKind.PROJECT_VOTE,
        target_table="projects",
        target_label="Project",
        record_table="project_votes",
        target_column="project_id",
        counter="upvotes",
        already_message="Already voted",
        missing_message="Vote not found",
    ),
    ActionKind.EVENT_VOLUNTEER: ActionSpec(
        kind=ActionKind.EVENT_VOLUNTEER,
        target_table="events",
        target_label="Event",
        record_table="event_volunteers",
        target_column="event_id",
        counter="volunteers",
        already_message="Already volunteered",
        missing_message="Not volunteered",
        requires_open_event=True,
        participation_type=ParticipationType.VOLUNTEER,
    ),
    ActionKind.EVENT_GOING: ActionSpec(
        kind=ActionKind.EVENT_GOING,
        target_table="events",
        target_label="Event",
        record_table="event_goings",
        target_column="event_id",
        counter="going",
        already_message="Already marked going",
        missing_message="Not marked going",
        requires_open_event=True,
        participation_type=ParticipationType.GOING,
    ),
    ActionKind.EVENT_HELPFUL: ActionSpec(
        kind=ActionKind.EVENT_HELPFUL,
        target_table="events",
        target_label="Event",
        record_table="event_helpful_votes",
        target_column="event_id",
        counter="helpful",
        already_message="Already marked helpful",
        missing_message="Not marked helpful",
    ),
    ActionKind.THREAD_LIKE: ActionSpec(
        kind=ActionKind.THREAD_LIKE,
        target_table="threads",
        target_label="Thread",
        record_table="thread_likes",
        target_column="thread_id",
        counter="likes",
        already_message="Already liked",
        missing_message="Not liked",
    ),
}


def get_action_spec(kind: ActionKind) -> ActionSpec:
    """Look up the storage layout for an action kind."""
    return ACTIONS[kind]


class VoteStatus(BaseModel):
    """Whether the current user has voted on a project."""
    voted: bool = False


class EventActionStatus(BaseModel):
    """The current user's participation flags for one event."""
    volunteered: bool = False
    going: bool = False
    helpful: bool = False


class ThreadLikeStatus(BaseModel):
    """Whether the current user has liked a thread."""
    liked: bool = False
