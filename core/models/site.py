# =============================================================================
# core/models/site.py - About Us / Contact Schemas
# =============================================================================
# `about_us` and `contact_info` are single-row tables edited by governmental
# users; `contact_submissions` collects the public contact form.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class AboutUsUpdate(BaseModel):
    """Every field is required; PUT replaces the whole page."""
    title_en: str = Field(..., min_length=1)
    title_bn: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    content_bn: str = Field(..., min_length=1)
    mission_en: str = Field(..., min_length=1)
    mission_bn: str = Field(..., min_length=1)
    vision_en: str = Field(..., min_length=1)
    vision_bn: str = Field(..., min_length=1)
    values_en: str = Field(..., min_length=1)
    values_bn: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)


class ContactInfoUpdate(BaseModel):
    """Contact page contents; map and social links are optional."""
    title_en: str = Field(..., min_length=1)
    title_bn: str = Field(..., min_length=1)
    address_en: str = Field(..., min_length=1)
    address_bn: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    website: str = Field(..., min_length=1)
    office_hours_en: str = Field(..., min_length=1)
    office_hours_bn: str = Field(..., min_length=1)
    map_embed: str | None = Field(default=None, description="Google Maps embed code")
    social_media: str | None = Field(default=None, description="JSON string of social links")


class ContactSubmissionCreate(BaseModel):
    """Public contact form."""
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1, max_length=10000)


class ContactSubmissionResponse(BaseModel):
    message: str = "Contact form submitted successfully"
    submission_id: str


class AboutUs(AboutUsUpdate):
    id: str
    updated_at: datetime | None = None


class ContactInfo(ContactInfoUpdate):
    id: str
    updated_at: datetime | None = None
