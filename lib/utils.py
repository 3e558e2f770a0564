# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from datetime import datetime, timezone
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        project_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        project_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Date Utilities
# =============================================================================

def today_iso() -> str:
    """Today's UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def is_date_before_today(date_str: str, today: str | None = None) -> bool:
    """
    Check whether a stored YYYY-MM-DD date lies before today.

    Event dates are stored as text, so this is a plain string comparison;
    it only orders correctly because the format is zero-padded ISO.

    Example:
        is_date_before_today("2020-01-01")  # True
        is_date_before_today("2020-01-01", today="2019-12-31")  # False
    """
    return date_str < (today or today_iso())


# =============================================================================
# Text Utilities
# =============================================================================

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def filename_slug(text: str) -> str:
    """
    Turn a title into a download-safe slug.

    Example:
        filename_slug("Tree Plantation 2025!")  # "tree_plantation_2025_"
    """
    return _NON_ALNUM.sub("_", text).lower()
