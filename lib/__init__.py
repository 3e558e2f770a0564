# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - certificate.py: Pillow renderer for participation certificates
# - utils.py: Shared utilities (UUID normalization, ISO dates, slugs)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, UniqueViolationError
from lib.certificate import CertificateData, CertificateRenderError, render_certificate
from lib.utils import filename_slug, is_date_before_today, normalize_uuid, today_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "UniqueViolationError",
    # Certificates
    "CertificateData",
    "CertificateRenderError",
    "render_certificate",
    # Utils
    "filename_slug",
    "is_date_before_today",
    "normalize_uuid",
    "today_iso",
]
