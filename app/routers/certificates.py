# =============================================================================
# app/routers/certificates.py - Finished Events & Certificate Endpoints
# =============================================================================
# Mounted under /api:
#   GET  /user/finished-events
#   POST /user/generate-certificate/{participation_id}
#   GET  /certificates/{participation_id}.png
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path
from fastapi.responses import Response

from app.dependencies import CurrentUser
from core.models.participation import CertificateResponse, FinishedEvent
from core.services.certificate_service import CertificateService

router = APIRouter()

ParticipationId = Annotated[UUID, Path(description="Event participation UUID")]


@router.get("/user/finished-events", response_model=list[FinishedEvent])
async def finished_events(user: CurrentUser):
    """Past events the caller volunteered for or attended, latest first."""
    return CertificateService.finished_events(user.id)


@router.post("/user/generate-certificate/{participation_id}", response_model=CertificateResponse)
async def generate_certificate(participation_id: ParticipationId, user: CurrentUser):
    """
    Enable the certificate download for a participation.

    Raises:
        400: Event hasn't finished yet
        403: Participation belongs to someone else
        404: Participation doesn't exist
    """
    message, url = CertificateService.generate(participation_id, user.id)
    return CertificateResponse(message=message, certificate_url=url)


@router.get(
    "/certificates/{participation_id}.png",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def download_certificate(participation_id: ParticipationId, user: CurrentUser):
    """
    Download a generated certificate as PNG.

    Raises:
        403: Participation belongs to someone else
        404: Participation missing or certificate not generated
    """
    certificate = CertificateService.download(participation_id, user.id)
    return Response(
        content=certificate.content,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{certificate.filename}"'},
    )
