# =============================================================================
# core/models/event.py - Event Schemas
# =============================================================================
# Events are proposed by any logged-in user, wait in `pending_events`, and
# become public once a governmental user approves them.
#
# Dates are stored as YYYY-MM-DD text; "has the event ended" is a string
# comparison against today's ISO date.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class EventProposal(BaseModel):
    """
    Schema for proposing an event.

    Example:
        {
            "title_en": "National Tree Plantation Campaign",
            "title_bn": "জাতীয় বৃক্ষরোপণ অভিযান",
            "description_en": "Nationwide tree plantation.",
            "description_bn": "দেশব্যাপী বৃক্ষরোপণ।",
            "category": "Environment",
            "date": "2026-07-05",
            "location": "Dhaka",
            "volunteers_needed": 50
        }
    """
    title_en: str = Field(..., min_length=1, max_length=255)
    title_bn: str = Field(..., min_length=1, max_length=255)
    description_en: str = Field(..., min_length=1)
    description_bn: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="Event date as YYYY-MM-DD",
    )
    location: str = Field(..., min_length=1)
    image_url: str | None = None
    volunteers_needed: int = Field(
        default=0,
        ge=0,
        description="How many volunteers the organiser is looking for",
    )


class EventProposalResponse(BaseModel):
    """Returned after a proposal is stored."""
    id: str
    message: str = "Event submitted for approval"


class Event(BaseModel):
    """An approved event."""
    id: str
    title_bn: str
    title_en: str
    description_bn: str
    description_en: str
    category: str
    date: str
    location: str
    image_url: str
    volunteers_needed: int = 0
    volunteers: int = 0
    going: int = 0
    helpful: int = 0
    proposer_id: str | None = None
    created_at: datetime | None = None


class EventWithProposer(Event):
    """Event listing row with the proposer's display name."""
    proposer_name: str | None = None
