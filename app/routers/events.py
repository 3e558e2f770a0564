# =============================================================================
# app/routers/events.py - Event Endpoints
# =============================================================================
# Listing, the volunteer / going / helpful toggles, and the proposal
# workflow (any user proposes, governmental users approve or reject).
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status

from app.dependencies import CurrentUser, GovernmentUser, OptionalUser, user_id_of
from core.models.action import ActionKind, EventActionStatus
from core.models.event import Event, EventProposal, EventProposalResponse, EventWithProposer
from core.services.action_service import ActionService
from core.services.event_service import EventService

router = APIRouter()

EventId = Annotated[UUID, Path(description="Event UUID")]


# =============================================================================
# Listing
# =============================================================================

@router.get("", response_model=list[EventWithProposer])
async def list_events():
    """All events with the proposer's display name."""
    return EventService.list_events()


@router.get("/top", response_model=list[Event])
async def top_events():
    """The four events with the most helpful votes."""
    return EventService.top_events()


# =============================================================================
# Proposals
# =============================================================================

@router.post("/propose", response_model=EventProposalResponse, status_code=status.HTTP_201_CREATED)
async def propose_event(request: EventProposal, user: CurrentUser):
    """
    Propose an event.

    The event is stored as pending and appears in /events once a
    governmental user approves it.
    """
    pending = EventService.propose_event(request, user.id)
    return EventProposalResponse(id=pending["id"])


@router.get("/pending", response_model=list[Event])
async def list_pending_events(user: GovernmentUser):
    return EventService.list_pending()


@router.post("/pending/{event_id}/approve", response_model=Event)
async def approve_pending_event(event_id: EventId, user: GovernmentUser):
    """Publish a pending event (404 if it doesn't exist)."""
    return EventService.approve_pending(event_id)


@router.delete("/pending/{event_id}")
async def reject_pending_event(event_id: EventId, user: GovernmentUser):
    EventService.delete_pending(event_id)
    return {"ok": True}


@router.delete("/{event_id}")
async def delete_event(event_id: EventId, user: GovernmentUser):
    EventService.delete_event(event_id)
    return {"ok": True}


# =============================================================================
# Participation toggles
# =============================================================================
# Volunteer / going answer 400 for an ended event even when anonymous, so
# these endpoints take the optional user and ActionService raises the 401.

@router.post("/{event_id}/volunteer", response_model=Event)
async def volunteer(event_id: EventId, user: OptionalUser):
    """
    Volunteer for an event.

    Raises:
        400: Event has ended
        401: Not logged in
        404: Event doesn't exist
        409: Already volunteered
    """
    return ActionService.perform(ActionKind.EVENT_VOLUNTEER, event_id, user_id_of(user))


@router.post("/{event_id}/unvolunteer", response_model=Event)
async def unvolunteer(event_id: EventId, user: OptionalUser):
    return ActionService.revoke(ActionKind.EVENT_VOLUNTEER, event_id, user_id_of(user))


@router.post("/{event_id}/going", response_model=Event)
async def mark_going(event_id: EventId, user: OptionalUser):
    """
    Mark yourself as going.

    Raises:
        400: Event has ended
        401: Not logged in
        404: Event doesn't exist
        409: Already marked going
    """
    return ActionService.perform(ActionKind.EVENT_GOING, event_id, user_id_of(user))


@router.post("/{event_id}/notgoing", response_model=Event)
async def mark_not_going(event_id: EventId, user: OptionalUser):
    return ActionService.revoke(ActionKind.EVENT_GOING, event_id, user_id_of(user))


@router.post("/{event_id}/helpful", response_model=Event)
async def mark_helpful(event_id: EventId, user: OptionalUser):
    return ActionService.perform(ActionKind.EVENT_HELPFUL, event_id, user_id_of(user))


@router.post("/{event_id}/unhelpful", response_model=Event)
async def mark_unhelpful(event_id: EventId, user: OptionalUser):
    return ActionService.revoke(ActionKind.EVENT_HELPFUL, event_id, user_id_of(user))


@router.get("/{event_id}/status", response_model=EventActionStatus)
async def event_status(event_id: EventId, user: OptionalUser):
    """The caller's volunteer / going / helpful flags (all false when anonymous)."""
    flags = ActionService.status(
        [ActionKind.EVENT_VOLUNTEER, ActionKind.EVENT_GOING, ActionKind.EVENT_HELPFUL],
        event_id,
        user_id_of(user),
    )
    return EventActionStatus(
        volunteered=flags[ActionKind.EVENT_VOLUNTEER],
        going=flags[ActionKind.EVENT_GOING],
        helpful=flags[ActionKind.EVENT_HELPFUL],
    )
