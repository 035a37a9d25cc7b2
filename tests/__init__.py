# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Appective site:
# - fake_supabase.py: In-memory stand-in for the Supabase client
# - test_models.py / test_utils.py: Unit tests for schemas and helpers
# - test_<resource>.py: API tests per content resource
# - test_uploads.py / test_maintenance.py: The asset and HTML5 ad pipeline
#
# Run tests with: pytest
# =============================================================================
