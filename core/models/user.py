# =============================================================================
# core/models/user.py - Account Schemas
# =============================================================================
# These models define the API contract for accounts:
# - RegistrationRequest: Citizen / governmental sign-up (lands in pending)
# - LoginRequest: Username (email) + password, optionally asserting a role
# - UserProfile: What /api/auth/me returns (never includes the password)
#
# A registration is not a user yet: it waits in `pending_approvals` until a
# governmental user approves it, at which point the row moves to `users`.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """
    Account roles.

    - citizen: Votes, participates, posts threads
    - governmental: Also creates/moderates content and approves accounts
    """
    CITIZEN = "citizen"
    GOVERNMENTAL = "governmental"


class IdType(str, Enum):
    """Identity document presented at registration."""
    NID = "nid"
    BIRTH_CERT = "birthCert"


class RegistrationRequest(BaseModel):
    """
    Schema for registering a new account.

    Example:
        {
            "username": "rahim@example.com",
            "password": "s3cret-pass",
            "first_name": "Rahim",
            "last_name": "Uddin",
            "id_type": "nid",
            "id_number": "1990123456789",
            "building": "12/A",
            "street": "Road 5",
            "thana": "Dhanmondi",
            "city": "Dhaka",
            "postal_code": "1205",
            "country": "Bangladesh",
            "mobile": "01700000000"
        }
    """

    username: str = Field(..., min_length=3, max_length=255, description="Email address used to log in")
    password: str = Field(..., min_length=1, max_length=255)
    role: UserRole = Field(default=UserRole.CITIZEN)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    id_type: IdType
    id_number: str = Field(..., min_length=1, max_length=50)
    building: str = Field(..., min_length=1)
    floor: str | None = None
    street: str = Field(..., min_length=1)
    thana: str = Field(..., min_length=1, description="Sub-district; targets notifications")
    city: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    mobile: str = Field(..., min_length=1, max_length=30)


class LoginRequest(BaseModel):
    """Credentials, plus the role the login form was submitted under."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    role: UserRole | None = None


class LoginResponse(BaseModel):
    """Returned after a successful login."""
    id: str
    username: str
    role: UserRole


class UserProfile(BaseModel):
    """
    Public view of a user row.

    The password hash is never part of this model.
    """
    id: str
    username: str
    role: UserRole
    first_name: str
    last_name: str
    id_type: str
    id_number: str
    building: str
    floor: str | None = None
    street: str
    thana: str
    city: str
    postal_code: str
    country: str
    mobile: str


class PendingRegistration(UserProfile):
    """A registration waiting for approval."""
    created_at: datetime | None = None


class AuthorSummary(BaseModel):
    """Name fields attached to threads and comments."""
    username: str
    first_name: str | None = None
    last_name: str | None = None
