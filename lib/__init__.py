# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - utils.py: Shared utilities (ids, slugs, content types, safe paths)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import (
    content_type_for,
    generate_job_id,
    normalize_uuid,
    safe_join,
    sanitize_filename,
    slugify,
)

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "content_type_for",
    "generate_job_id",
    "normalize_uuid",
    "safe_join",
    "sanitize_filename",
    "slugify",
]
