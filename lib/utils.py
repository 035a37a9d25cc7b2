# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - UUID normalization and id generation
# - Slugs for storage folder names
# - Content types for files served from storage
# - Safe path joining for user-supplied relative paths
# =============================================================================

import random
import re
import string
import time
from pathlib import Path
from uuid import UUID


# =============================================================================
# Identifier Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        application_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        application_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def generate_job_id() -> str:
    """
    Generate an id for a job opening: job_<epoch ms>_<9 base36 chars>.

    Example:
        generate_job_id()  # "job_1718000000000_k3j9x0a1b"
    """
    alphabet = string.digits + string.ascii_lowercase
    suffix = "".join(random.choices(alphabet, k=9))
    return f"job_{int(time.time() * 1000)}_{suffix}"


# =============================================================================
# Naming Utilities
# =============================================================================

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")
_NON_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def slugify(value: str | None, default: str = "") -> str:
    """
    Turn free text into a folder-safe slug.

    Every character outside [a-z0-9] becomes a dash and runs are kept,
    so "Finance & Banking" becomes "finance---banking".
    """
    text = (value or "").strip().lower()
    if not text:
        return default
    return _NON_SLUG_CHARS.sub("-", text)


def sanitize_filename(filename: str) -> str:
    """Replace anything but letters, digits, dots and dashes with underscores."""
    return _NON_FILENAME_CHARS.sub("_", filename)


# =============================================================================
# Content Types
# =============================================================================

_CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".htm": "text/html; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".json": "application/json; charset=utf-8",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".woff": "font/woff2",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".mp4": "video/mp4",
    ".mp3": "audio/mpeg",
    ".xml": "application/xml; charset=utf-8",
}


def content_type_for(filename: str) -> str:
    """
    Content type a browser needs to render an HTML5 ad asset.

    Example:
        content_type_for("js/script.js")  # "application/javascript; charset=utf-8"
    """
    return _CONTENT_TYPES.get(Path(filename).suffix.lower(), "application/octet-stream")


# =============================================================================
# Path Utilities
# =============================================================================

def safe_join(root: Path, relative: str) -> Path | None:
    """
    Join a user-supplied relative path onto root.

    Returns None when the result would land outside root, e.g. through
    ".." segments.
    """
    root = root.resolve()
    candidate = (root / relative.lstrip("/\\")).resolve()
    if candidate == root or root in candidate.parents:
        return candidate
    return None
