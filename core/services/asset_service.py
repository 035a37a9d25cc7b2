# =============================================================================
# core/services/asset_service.py - Local Asset Pipeline
# =============================================================================
# Writes uploaded files below the public and private directories:
# - Images for the site (partners, team, portfolio...)
# - HTML5 masthead creatives uploaded as ZIP archives
# - Candidate CVs, kept out of the public directory
#
# Every user-supplied path goes through safe_join so nothing can be
# written or removed outside its root.
# =============================================================================

import io
import logging
import shutil
import zipfile
from pathlib import Path
from typing import Any
from uuid import uuid4

from lib.utils import safe_join, slugify
from app.config import settings
from app.exceptions import (
    FileTooLargeError,
    InvalidArchiveError,
    InvalidAssetPathError,
    InvalidFileTypeError,
    MissingEntryFileError,
)
from core.services.storage_service import HTML5_ADS_PREFIX, StorageService

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"]
ZIP_EXTENSIONS = [".zip"]
CV_EXTENSIONS = [".pdf", ".doc", ".docx"]

ENTRY_FILE = "index.html"
MASTHEAD_URL_PREFIX = "/interactive_mastheads_zips/"
PENDING_ZIP_PREFIX = "temp-"

DEFAULT_CATEGORY = "uncategorized"
DEFAULT_BRAND = "unknown"


def _check_extension(filename: str, allowed: list[str]) -> str:
    extension = Path(filename or "").suffix.lower()
    if extension not in allowed:
        raise InvalidFileTypeError(filename, allowed)
    return extension


def _check_size(size: int, max_mb: int) -> None:
    if size > settings.mb_to_bytes(max_mb):
        raise FileTooLargeError(size / (1024 * 1024), max_mb)


def _public_url(path: Path) -> str:
    """Site-relative URL of a file below the public directory."""
    return "/" + path.relative_to(settings.public_path).as_posix()


def _extract_archive(archive: zipfile.ZipFile, target: Path, filename: str) -> None:
    """
    Extract every entry of archive into target.

    All entry names are checked before anything is written.

    Raises:
        InvalidArchiveError: If an entry would land outside target
    """
    members: list[tuple[zipfile.ZipInfo, Path]] = []
    for info in archive.infolist():
        destination = safe_join(target, info.filename)
        if destination is None or destination == target.resolve():
            raise InvalidArchiveError(filename, f"Unsafe path in archive: {info.filename}")
        members.append((info, destination))

    for info, destination in members:
        if info.is_dir():
            destination.mkdir(parents=True, exist_ok=True)
            continue
        destination.parent.mkdir(parents=True, exist_ok=True)
        with archive.open(info) as source, open(destination, "wb") as output:
            shutil.copyfileobj(source, output)


class AssetService:
    """Service for files stored on the local filesystem."""

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------

    @staticmethod
    def save_image(
        content: bytes,
        filename: str,
        category: str | None = None,
        brand: str | None = None,
    ) -> str:
        """
        Save an uploaded image below uploads/images/.

        Returns:
            Site-relative URL, e.g. /uploads/images/online/brand/<uuid>.png

        Raises:
            InvalidFileTypeError: If the file is not JPEG/PNG/GIF/WebP/SVG
            FileTooLargeError: If it exceeds MAX_IMAGE_SIZE_MB
        """
        extension = _check_extension(filename, IMAGE_EXTENSIONS)
        _check_size(len(content), settings.MAX_IMAGE_SIZE_MB)

        folder = (
            settings.public_path / "uploads" / "images"
            / slugify(category, DEFAULT_CATEGORY) / slugify(brand, DEFAULT_BRAND)
        )
        folder.mkdir(parents=True, exist_ok=True)

        destination = folder / f"{uuid4()}{extension}"
        destination.write_bytes(content)

        logger.info(f"Saved image {filename} to {destination}")
        return _public_url(destination)

    # -------------------------------------------------------------------------
    # HTML5 mastheads
    # -------------------------------------------------------------------------

    @staticmethod
    def save_masthead_zip(
        content: bytes,
        filename: str,
        category: str | None = None,
        brand: str | None = None,
    ) -> dict[str, Any]:
        """
        Extract an HTML5 ad archive into a fresh directory.

        The archive is extracted to
        interactive_mastheads_zips/<category>/<brand>/<uuid>/ and must have
        index.html at its root.

        Returns:
            Dict with file_path (URL of the extracted index.html) and
            storage_url (set when mirroring to storage is enabled)

        Raises:
            InvalidFileTypeError: If the file is not named .zip
            FileTooLargeError: If it exceeds MAX_ZIP_SIZE_MB
            InvalidArchiveError: If it is not a readable ZIP or has unsafe paths
            MissingEntryFileError: If index.html is not at the archive root
        """
        _check_extension(filename, ZIP_EXTENSIONS)
        _check_size(len(content), settings.MAX_ZIP_SIZE_MB)

        buffer = io.BytesIO(content)
        if not zipfile.is_zipfile(buffer):
            raise InvalidArchiveError(filename, "File is not a ZIP archive")

        category_slug = slugify(category, DEFAULT_CATEGORY)
        brand_slug = slugify(brand, DEFAULT_BRAND)
        ad_id = str(uuid4())
        target = settings.masthead_root / category_slug / brand_slug / ad_id

        try:
            with zipfile.ZipFile(buffer) as archive:
                if ENTRY_FILE not in archive.namelist():
                    raise MissingEntryFileError(filename, ENTRY_FILE)

                target.mkdir(parents=True)
                try:
                    _extract_archive(archive, target, filename)
                except Exception:
                    shutil.rmtree(target, ignore_errors=True)
                    raise

        except zipfile.BadZipFile as e:
            raise InvalidArchiveError(filename, str(e))

        entry = target / ENTRY_FILE
        logger.info(f"Extracted masthead {filename} to {target}")

        storage_url = None
        if settings.MASTHEAD_MIRROR_TO_STORAGE:
            prefix = f"{HTML5_ADS_PREFIX}/{category_slug}/{brand_slug}/{ad_id}"
            StorageService.mirror_directory(target, prefix)
            storage_url = StorageService.get_public_url(f"{prefix}/{ENTRY_FILE}")

        return {"file_path": _public_url(entry), "storage_url": storage_url}

    @staticmethod
    def extract_pending_zips() -> dict[str, Any]:
        """
        Extract temp-*.zip archives left in the masthead directory.

        Each archive is extracted next to itself into a directory named
        without the temp- prefix; the first .html file is renamed to
        index.html when the archive has none, and the ZIP is deleted.
        """
        root = settings.masthead_root
        if not root.is_dir():
            return {
                "success": False,
                "message": "No interactive_mastheads_zips directory found",
                "extracted_count": 0,
                "error_count": 0,
                "errors": [],
            }

        archives = sorted(
            path for path in root.rglob("*")
            if path.is_file()
            and path.name.startswith(PENDING_ZIP_PREFIX)
            and path.name.lower().endswith(".zip")
        )

        errors = []
        for zip_path in archives:
            target = zip_path.parent / zip_path.name[len(PENDING_ZIP_PREFIX):-len(".zip")]
            try:
                target.mkdir(parents=True, exist_ok=True)
                with zipfile.ZipFile(zip_path) as archive:
                    _extract_archive(archive, target, zip_path.name)

                entry = target / ENTRY_FILE
                if not entry.exists():
                    html_files = sorted(
                        p for p in target.iterdir()
                        if p.is_file() and p.suffix.lower() == ".html"
                    )
                    if html_files:
                        html_files[0].rename(entry)
                        logger.info(f"Renamed {html_files[0].name} to {ENTRY_FILE} in {target}")

                zip_path.unlink()
                logger.info(f"Extracted and removed {zip_path}")

            except (zipfile.BadZipFile, InvalidArchiveError, OSError) as e:
                message = e.message if isinstance(e, InvalidArchiveError) else str(e)
                logger.error(f"Error extracting {zip_path}: {message}")
                errors.append({"file": _public_url(zip_path), "error": message})

        extracted = len(archives) - len(errors)
        return {
            "success": not errors,
            "message": f"Extracted {extracted} ZIP files successfully",
            "extracted_count": extracted,
            "error_count": len(errors),
            "errors": errors,
        }

    @staticmethod
    def _masthead_path(relative: str, path: str) -> Path:
        """Resolve a path below the masthead directory, rejecting anything else."""
        resolved = safe_join(settings.public_path, relative)
        root = settings.masthead_root.resolve()
        if resolved is None or root not in resolved.parents:
            raise InvalidAssetPathError(path, MASTHEAD_URL_PREFIX)
        return resolved

    @staticmethod
    def check_masthead_file(path: str) -> dict[str, Any]:
        """
        Report whether a masthead file exists.

        Raises:
            InvalidAssetPathError: If path is not below /interactive_mastheads_zips/
        """
        if not path.startswith(MASTHEAD_URL_PREFIX):
            raise InvalidAssetPathError(path, MASTHEAD_URL_PREFIX)

        resolved = AssetService._masthead_path(path, path)
        return {"exists": resolved.exists(), "path": path}

    @staticmethod
    def remove_masthead_directory(file_path: str) -> dict[str, Any]:
        """
        Remove the extracted directory of an HTML5 ad.

        file_path may point at the directory or at its index.html.

        Raises:
            InvalidAssetPathError: If the path is not below /interactive_mastheads_zips/
        """
        marker = file_path.find(MASTHEAD_URL_PREFIX)
        if marker == -1:
            raise InvalidAssetPathError(file_path, MASTHEAD_URL_PREFIX)

        relative = file_path[marker:].rstrip("/")
        if relative.endswith("/" + ENTRY_FILE):
            relative = relative[: -len(ENTRY_FILE) - 1]

        directory = AssetService._masthead_path(relative, file_path)
        if not directory.is_dir():
            return {"success": False, "message": f"Directory not found: {relative}"}

        shutil.rmtree(directory)
        logger.info(f"Removed masthead directory {directory}")
        return {"success": True, "message": f"Successfully removed directory: {relative}"}

    # -------------------------------------------------------------------------
    # CVs
    # -------------------------------------------------------------------------

    @staticmethod
    def validate_cv(filename: str, size: int) -> None:
        """
        Raises:
            InvalidFileTypeError: If the CV is not PDF/DOC/DOCX
            FileTooLargeError: If it exceeds MAX_CV_SIZE_MB
        """
        _check_extension(filename, CV_EXTENSIONS)
        _check_size(size, settings.MAX_CV_SIZE_MB)

    @staticmethod
    def save_cv(content: bytes, filename: str) -> str:
        """
        Store a CV below the private directory.

        Returns:
            Path relative to the private directory, e.g. cv/<uuid>.pdf
        """
        AssetService.validate_cv(filename, len(content))
        extension = Path(filename).suffix.lower()

        folder = settings.private_path / "cv"
        folder.mkdir(parents=True, exist_ok=True)

        destination = folder / f"{uuid4()}{extension}"
        destination.write_bytes(content)

        logger.info(f"Saved CV {filename} to {destination}")
        return destination.relative_to(settings.private_path).as_posix()

    @staticmethod
    def private_file(relative: str) -> Path | None:
        """Absolute path of a stored private file, None if it is missing or unsafe."""
        path = safe_join(settings.private_path, relative)
        if path is None or not path.is_file():
            return None
        return path

    @staticmethod
    def delete_private_file(relative: str) -> None:
        path = AssetService.private_file(relative)
        if path is None:
            return
        try:
            path.unlink()
            logger.info(f"Deleted private file {relative}")
        except OSError as e:
            logger.warning(f"Could not delete private file {relative}: {e}")
