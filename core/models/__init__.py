# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - action.py: Once-per-user action kinds and their storage layout
# - user.py: Registration, login and profile schemas
# - project.py: Project and poll schemas
# - event.py: Event and event proposal schemas
# - thread.py: Discussion thread and comment schemas
# - notification.py: Targeted notification schemas
# - site.py: About us / contact schemas
# - participation.py: Event participation and certificate schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Action Models - Votes, participation, likes
# -----------------------------------------------------------------------------
from .action import (
    ACTIONS,
    ActionKind,
    ActionSpec,
    EventActionStatus,
    ParticipationType,
    ThreadLikeStatus,
    VoteStatus,
    get_action_spec,
)

# -----------------------------------------------------------------------------
# Account Models
# -----------------------------------------------------------------------------
from .user import (
    AuthorSummary,
    IdType,
    LoginRequest,
    LoginResponse,
    PendingRegistration,
    RegistrationRequest,
    UserProfile,
    UserRole,
)

# -----------------------------------------------------------------------------
# Content Models
# -----------------------------------------------------------------------------
from .project import Poll, Project, ProjectCreate, ProjectStatus, ProjectStatusUpdate
from .event import Event, EventProposal, EventProposalResponse, EventWithProposer
from .thread import Comment, CommentCreate, Thread, ThreadCreate, ThreadListItem
from .notification import (
    MessageResponse,
    Notification,
    NotificationCreate,
    TargetType,
    UserNotification,
)
from .site import (
    AboutUs,
    AboutUsUpdate,
    ContactInfo,
    ContactInfoUpdate,
    ContactSubmissionCreate,
    ContactSubmissionResponse,
)
from .participation import (
    CertificateResponse,
    FinishedEvent,
    Participation,
    certificate_url_for,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Actions
    "ACTIONS",
    "ActionKind",
    "ActionSpec",
    "EventActionStatus",
    "ParticipationType",
    "ThreadLikeStatus",
    "VoteStatus",
    "get_action_spec",
    # Accounts
    "AuthorSummary",
    "IdType",
    "LoginRequest",
    "LoginResponse",
    "PendingRegistration",
    "RegistrationRequest",
    "UserProfile",
    "UserRole",
    # Projects
    "Poll",
    "Project",
    "ProjectCreate",
    "ProjectStatus",
    "ProjectStatusUpdate",
    # Events
    "Event",
    "EventProposal",
    "EventProposalResponse",
    "EventWithProposer",
    # Threads
    "Comment",
    "CommentCreate",
    "Thread",
    "ThreadCreate",
    "ThreadListItem",
    # Notifications
    "MessageResponse",
    "Notification",
    "NotificationCreate",
    "TargetType",
    "UserNotification",
    # Site
    "AboutUs",
    "AboutUsUpdate",
    "ContactInfo",
    "ContactInfoUpdate",
    "ContactSubmissionCreate",
    "ContactSubmissionResponse",
    # Participation
    "CertificateResponse",
    "FinishedEvent",
    "Participation",
    "certificate_url_for",
]
