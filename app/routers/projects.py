# =============================================================================
# app/routers/projects.py - Project Endpoints
# =============================================================================
# Public listing, governmental management, and the per-user upvote toggle.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status

from app.dependencies import GovernmentUser, OptionalUser, user_id_of
from app.exceptions import NotFoundError
from core.models.action import ActionKind, VoteStatus
from core.models.project import Project, ProjectCreate, ProjectStatusUpdate
from core.services.action_service import ActionService
from core.services.project_service import ProjectService

router = APIRouter()

ProjectId = Annotated[UUID, Path(description="Project UUID")]


@router.get("", response_model=list[Project])
async def list_projects():
    """All projects, newest first."""
    return ProjectService.list_projects()


@router.get("/top", response_model=list[Project])
async def top_projects():
    """The four most upvoted projects."""
    return ProjectService.top_projects()


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(request: ProjectCreate, user: GovernmentUser):
    """Create a project (governmental only)."""
    return ProjectService.create_project(request)


@router.delete("/{project_id}")
async def delete_project(project_id: ProjectId, user: GovernmentUser):
    ProjectService.delete_project(project_id)
    return {"ok": True}


@router.patch("/{project_id}/status", response_model=Project)
async def update_project_status(
    project_id: ProjectId,
    request: ProjectStatusUpdate,
    user: GovernmentUser,
):
    """
    Set a project's status.

    Status must be one of Planning, Active, Implementation, Completed,
    Partially Active; anything else is a 400.
    """
    project = ProjectService.update_status(project_id, request.status)
    if project is None:
        raise NotFoundError("Project not found", details={"id": str(project_id)})
    return project


# =============================================================================
# Upvotes
# =============================================================================

@router.post("/{project_id}/upvote", response_model=Project)
async def upvote_project(project_id: ProjectId, user: OptionalUser):
    """
    Upvote a project once.

    Returns the project with its new upvote count.

    Raises:
        401: Not logged in
        404: Project doesn't exist
        409: Already voted
    """
    return ActionService.perform(ActionKind.PROJECT_VOTE, project_id, user_id_of(user))


@router.post("/{project_id}/unvote", response_model=Project)
async def unvote_project(project_id: ProjectId, user: OptionalUser):
    """
    Withdraw an upvote.

    Raises:
        401: Not logged in
        404: No vote to withdraw
    """
    return ActionService.revoke(ActionKind.PROJECT_VOTE, project_id, user_id_of(user))


@router.get("/{project_id}/vote-status", response_model=VoteStatus)
async def project_vote_status(project_id: ProjectId, user: OptionalUser):
    """Whether the caller has upvoted (always false when anonymous)."""
    voted = ActionService.has_acted(ActionKind.PROJECT_VOTE, project_id, user_id_of(user))
    return VoteStatus(voted=voted)
