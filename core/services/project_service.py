# =============================================================================
# core/services/project_service.py - Projects & Polls
# =============================================================================
# Project CRUD for governmental users plus the read side for citizens.
# Upvotes go through ActionService (ActionKind.PROJECT_VOTE).
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.config import settings
from app.exceptions import BadRequestError
from core.models.project import Poll, ProjectCreate, ProjectStatus
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

PROJECTS_TABLE = "projects"
TOP_LIMIT = 4


class ProjectService:
    """
    Service for project operations.
    """

    @staticmethod
    def list_projects() -> list[dict[str, Any]]:
        """All projects, newest first."""
        return SupabaseClient.fetch_rows(PROJECTS_TABLE, order_by="created_at", desc=True)

    @staticmethod
    def top_projects(limit: int = TOP_LIMIT) -> list[dict[str, Any]]:
        """Most upvoted projects."""
        return SupabaseClient.fetch_rows(
            PROJECTS_TABLE, order_by="upvotes", desc=True, limit=limit
        )

    @staticmethod
    def list_polls() -> list[Poll]:
        """The top projects presented as polls (votes = upvotes)."""
        return [Poll.from_project(p) for p in ProjectService.top_projects()]

    @staticmethod
    def create_project(request: ProjectCreate) -> dict[str, Any]:
        """Create a project; a placeholder image is used when none is given."""
        data = request.model_dump()
        data["image_url"] = request.image_url or settings.DEFAULT_PROJECT_IMAGE_URL

        project = SupabaseClient.insert_row(PROJECTS_TABLE, data)
        logger.info(f"Created project: {project['id']}")
        return project

    @staticmethod
    def delete_project(project_id: str | UUID) -> None:
        """Delete a project (its votes go with it via ON DELETE CASCADE)."""
        project_id = normalize_uuid(project_id)
        SupabaseClient.delete_rows(PROJECTS_TABLE, {"id": project_id})
        logger.info(f"Deleted project: {project_id}")

    @staticmethod
    def update_status(project_id: str | UUID, status: str | None) -> dict[str, Any] | None:
        """
        Change a project's lifecycle status.

        Returns:
            The updated project, or None if no project has that id

        Raises:
            BadRequestError: If status isn't one of ProjectStatus
        """
        allowed = [s.value for s in ProjectStatus]
        if not status or status not in allowed:
            raise BadRequestError(
                "Invalid status",
                code="INVALID_STATUS",
                suggestion=f"Use one of: {', '.join(allowed)}",
            )

        updated = SupabaseClient.update_rows(
            PROJECTS_TABLE, {"status": status}, {"id": normalize_uuid(project_id)}
        )
        return updated[0] if updated else None
