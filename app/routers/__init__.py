# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - projects.py: Projects and the upvote toggle
# - polls.py: Top projects presented as home page polls
# - events.py: Events, participation toggles and proposals
# - threads.py: Discussion threads, comments and likes
# - notifications.py: Thana / countrywide notifications
# - approvals.py: Registration approval workflow
# - site.py: About us, contact info and the contact form
# - certificates.py: Finished events and participation certificates
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import projects
from . import polls
from . import events
from . import threads
from . import notifications
from . import approvals
from . import site
from . import certificates

__all__ = [
    "health",
    "projects",
    "polls",
    "events",
    "threads",
    "notifications",
    "approvals",
    "site",
    "certificates",
]
