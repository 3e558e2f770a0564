# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .action_service import ActionService
from .user_service import UserService
from .project_service import ProjectService
from .event_service import EventService
from .thread_service import ThreadService
from .notification_service import NotificationService
from .site_service import SiteService
from .certificate_service import CertificateService, RenderedCertificate

__all__ = [
    "ActionService",
    "UserService",
    "ProjectService",
    "EventService",
    "ThreadService",
    "NotificationService",
    "SiteService",
    "CertificateService",
    "RenderedCertificate",
]
