# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers, static mounts
# - config.py: Environment variable loading and settings
# - routers/: API endpoints and server-rendered pages, organized by feature
# - auth/: Supabase token verification and the admin gate
# - templates/ and static/: Jinja2 pages and the browser scripts they load
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
