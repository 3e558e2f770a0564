# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the CivicMoncho API:
# - fakes.py: In-memory Supabase stand-in used by every test
# - test_models.py / test_lib.py: Unit tests for schemas and helpers
# - test_action_service.py: The shared once-per-user toggle logic
# - test_*_api.py, test_certificates.py: Endpoint tests via TestClient
#
# Run tests with: pytest
# =============================================================================
