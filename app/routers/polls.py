# =============================================================================
# app/routers/polls.py - Home Page Poll Endpoints
# =============================================================================
# Polls are the four most upvoted projects. A poll vote is a project upvote,
# so a user who upvoted on the projects page has already voted here.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import OptionalUser, user_id_of
from core.models.action import ActionKind
from core.models.project import Poll, Project
from core.services.action_service import ActionService
from core.services.project_service import ProjectService

router = APIRouter()

PollId = Annotated[UUID, Path(description="Project UUID backing the poll")]


@router.get("", response_model=list[Poll])
async def list_polls():
    return ProjectService.list_polls()


@router.post("/{poll_id}/vote", response_model=Project)
async def vote_poll(poll_id: PollId, user: OptionalUser):
    """Vote for a poll; returns the underlying project."""
    return ActionService.perform(ActionKind.PROJECT_VOTE, poll_id, user_id_of(user))


@router.post("/{poll_id}/unvote", response_model=Project)
async def unvote_poll(poll_id: PollId, user: OptionalUser):
    return ActionService.revoke(ActionKind.PROJECT_VOTE, poll_id, user_id_of(user))
