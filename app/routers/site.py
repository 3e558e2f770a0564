# =============================================================================
# app/routers/site.py - About Us / Contact Endpoints
# =============================================================================

from typing import Optional

from fastapi import APIRouter

from app.dependencies import GovernmentUser
from core.models.site import (
    AboutUs,
    AboutUsUpdate,
    ContactInfo,
    ContactInfoUpdate,
    ContactSubmissionCreate,
    ContactSubmissionResponse,
)
from core.services.site_service import SiteService

router = APIRouter()


@router.get("/about", response_model=Optional[AboutUs])
async def get_about():
    """The About Us page, or null if it was never saved."""
    return SiteService.get_about()


@router.put("/about", response_model=AboutUs)
async def update_about(request: AboutUsUpdate, user: GovernmentUser):
    return SiteService.save_about(request)


@router.get("/contact", response_model=Optional[ContactInfo])
async def get_contact():
    return SiteService.get_contact()


@router.put("/contact", response_model=ContactInfo)
async def update_contact(request: ContactInfoUpdate, user: GovernmentUser):
    return SiteService.save_contact(request)


@router.post("/contact/submit", response_model=ContactSubmissionResponse)
async def submit_contact(request: ContactSubmissionCreate):
    """
    Public contact form.

    Raises:
        400: Invalid email format
    """
    submission = SiteService.submit_contact(request)
    return ContactSubmissionResponse(submission_id=submission["id"])
