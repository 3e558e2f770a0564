# =============================================================================
# core/models/participation.py - Event Participation & Certificate Schemas
# =============================================================================
# A participation row is written whenever a user volunteers for or marks
# "going" to an event. Once the event date has passed the user may generate
# a certificate for it, which just flips `certificate_generated` and stores
# the download URL; the PNG itself is rendered on download.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel

from .event import Event


class Participation(BaseModel):
    id: str
    event_id: str
    user_id: str
    participation_type: str
    certificate_generated: int = 0
    certificate_url: str | None = None
    created_at: datetime | None = None


class FinishedEvent(BaseModel):
    """A past event the user took part in, with the participation row."""
    event: Event
    participation: Participation


class CertificateResponse(BaseModel):
    message: str
    certificate_url: str | None = None


def certificate_url_for(participation_id: str) -> str:
    """Deterministic download URL for a participation's certificate."""
    return f"/api/certificates/{participation_id}.png"
