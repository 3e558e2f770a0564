# =============================================================================
# core/models/project.py - Project & Poll Schemas
# =============================================================================
# Projects are government initiatives citizens can upvote. "Polls" are not a
# separate table: the home page shows the four most upvoted projects as polls
# and a poll vote is a project upvote.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ProjectStatus(str, Enum):
    """Lifecycle stages a governmental user can set on a project."""
    PLANNING = "Planning"
    ACTIVE = "Active"
    IMPLEMENTATION = "Implementation"
    COMPLETED = "Completed"
    PARTIALLY_ACTIVE = "Partially Active"


class ProjectCreate(BaseModel):
    """
    Schema for creating a project (governmental only).

    Example:
        {
            "title_en": "Dhaka Metro Rail Project",
            "title_bn": "ঢাকা মেট্রোরেল প্রকল্প",
            "description_en": "Rapid mass transit across Dhaka.",
            "description_bn": "ঢাকায় দ্রুতগতির গণপরিবহন।",
            "category": "Infrastructure",
            "status": "Active",
            "budget": "৳ ৩৩,৪৭২ কোটি"
        }
    """
    title_en: str = Field(..., min_length=1, max_length=255)
    title_bn: str = Field(..., min_length=1, max_length=255)
    description_en: str = Field(..., min_length=1)
    description_bn: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)
    budget: str = Field(..., min_length=1, description="Display string, e.g. '৳ ৮,৯৪০ কোটি'")
    image_url: str | None = Field(default=None, description="Placeholder image when omitted")


class ProjectStatusUpdate(BaseModel):
    """Request body for PATCH /projects/{id}/status."""
    status: str | None = None


class Project(BaseModel):
    """A project as returned by the API."""
    id: str
    title_bn: str
    title_en: str
    description_bn: str
    description_en: str
    category: str
    budget: str
    status: str
    image_url: str
    upvotes: int = 0
    created_at: datetime | None = None


class Poll(BaseModel):
    """A top project presented as a poll; `votes` mirrors `upvotes`."""
    id: str
    title_bn: str
    title_en: str
    description_bn: str
    description_en: str
    votes: int = 0
    created_at: datetime | None = None

    @classmethod
    def from_project(cls, project: dict) -> "Poll":
        return cls(
            id=project["id"],
            title_bn=project["title_bn"],
            title_en=project["title_en"],
            description_bn=project["description_bn"],
            description_en=project["description_en"],
            votes=project.get("upvotes") or 0,
            created_at=project.get("created_at"),
        )
