# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for data validation
# - services/: Static-method services that talk to Supabase through
#   lib.supabase_client and raise app.exceptions errors
#
# Code in this package should NOT import FastAPI routers or Request objects.
# =============================================================================
