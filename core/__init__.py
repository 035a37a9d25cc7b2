# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the site's business logic:
# - models/: Pydantic schemas for request and response validation
# - services/: Content CRUD, careers, newsletter, banner and the asset pipeline
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
