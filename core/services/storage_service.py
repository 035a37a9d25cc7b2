# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles file upload/download operations with Supabase Storage:
# - Banner images uploaded from the dashboard
# - Mirroring extracted HTML5 ads into the bucket
# - Repairing content types of ads uploaded with the wrong one
# =============================================================================

import logging
import time
from pathlib import Path
from typing import Any

from lib.supabase_client import SupabaseClient
from lib.utils import content_type_for, sanitize_filename
from app.config import settings
from app.exceptions import StorageDownloadError, StorageListError, StorageUploadError

logger = logging.getLogger(__name__)

# Prefix HTML5 ads are stored under in the bucket
HTML5_ADS_PREFIX = "html5-ads"

# Errors reported back from a content-type repair run
MAX_REPORTED_ERRORS = 50


class StorageService:
    """
    Service for Supabase Storage operations.

    All paths are relative to settings.STORAGE_BUCKET.
    """

    @staticmethod
    def _bucket():
        return SupabaseClient.get_client().storage.from_(settings.STORAGE_BUCKET)

    @staticmethod
    def upload_bytes(
        path: str,
        content: bytes,
        content_type: str,
        upsert: bool = True,
        cache_control: str | None = None,
    ) -> str:
        """
        Upload raw bytes to storage.

        Args:
            path: Destination path in the bucket
            content: File bytes
            content_type: MIME type browsers will be served
            upsert: Overwrite an existing file at path
            cache_control: Optional max-age in seconds

        Returns:
            Storage path

        Raises:
            StorageUploadError: If upload fails
        """
        file_options = {"content-type": content_type, "upsert": "true" if upsert else "false"}
        if cache_control:
            file_options["cache-control"] = cache_control

        try:
            StorageService._bucket().upload(
                path=path,
                file=content,
                file_options=file_options
            )

            logger.info(f"Uploaded file to storage: {path}")
            return path

        except Exception as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageUploadError(str(e))

    @staticmethod
    def download(storage_path: str) -> bytes:
        """
        Download raw file content from storage.

        Raises:
            StorageDownloadError: If download fails
        """
        try:
            response = StorageService._bucket().download(storage_path)
            logger.debug(f"Downloaded file from storage: {storage_path}")
            return response

        except Exception as e:
            logger.error(f"Storage download failed: {e}")
            raise StorageDownloadError(storage_path, str(e))

    @staticmethod
    def get_public_url(storage_path: str) -> str:
        """
        Get a public URL for a storage file.

        Args:
            storage_path: Path in storage bucket

        Returns:
            Public URL string
        """
        try:
            return StorageService._bucket().get_public_url(storage_path)
        except Exception as e:
            logger.error(f"Failed to get public URL: {e}")
            raise StorageDownloadError(storage_path, str(e))

    @staticmethod
    def remove(storage_paths: list[str]) -> bool:
        """
        Delete files from storage.

        Returns:
            True if deleted successfully
        """
        try:
            StorageService._bucket().remove(storage_paths)
            logger.info(f"Deleted {len(storage_paths)} files from storage")
            return True

        except Exception as e:
            logger.error(f"Failed to delete files: {e}")
            return False

    @staticmethod
    def list_folder(path: str) -> list[dict[str, Any]]:
        """
        List the direct children of a folder.

        Folders come back with id None, files with an id.

        Raises:
            StorageListError: If the bucket cannot be listed
        """
        try:
            response = StorageService._bucket().list(path)
            return response or []

        except Exception as e:
            logger.error(f"Failed to list files under {path}: {e}")
            raise StorageListError(path, str(e))

    @staticmethod
    def list_files_recursive(prefix: str) -> list[str]:
        """Full paths of every file below prefix."""
        files: list[str] = []
        pending = [prefix.strip("/")]

        while pending:
            folder = pending.pop()
            for entry in StorageService.list_folder(folder):
                name = entry.get("name")
                if not name or name == ".emptyFolderPlaceholder":
                    continue
                full_path = f"{folder}/{name}" if folder else name
                if entry.get("id") is None:
                    pending.append(full_path)
                else:
                    files.append(full_path)

        return sorted(files)

    # -------------------------------------------------------------------------
    # Site operations
    # -------------------------------------------------------------------------

    @staticmethod
    def upload_banner_image(filename: str, content: bytes, content_type: str) -> tuple[str, str]:
        """
        Store a top banner image.

        Returns:
            Tuple of (storage path, public URL)
        """
        path = f"images/banner/{int(time.time() * 1000)}_{sanitize_filename(filename)}"
        StorageService.upload_bytes(path, content, content_type, upsert=False)
        return path, StorageService.get_public_url(path)

    @staticmethod
    def mirror_directory(local_dir: Path, prefix: str) -> list[str]:
        """
        Upload every file below local_dir to prefix/, keeping relative paths.

        Each file gets the content type a browser needs to render it.

        Returns:
            Storage paths of the uploaded files
        """
        uploaded = []
        for file_path in sorted(p for p in local_dir.rglob("*") if p.is_file()):
            relative = file_path.relative_to(local_dir).as_posix()
            storage_path = f"{prefix.strip('/')}/{relative}"
            StorageService.upload_bytes(
                storage_path,
                file_path.read_bytes(),
                content_type_for(relative),
                cache_control="3600",
            )
            uploaded.append(storage_path)

        logger.info(f"Mirrored {len(uploaded)} files to storage under {prefix}")
        return uploaded

    @staticmethod
    def fix_content_types(prefix: str = HTML5_ADS_PREFIX) -> dict[str, Any]:
        """
        Re-upload every file under prefix with the content type its extension calls for.

        Files uploaded as application/octet-stream make browsers download
        HTML5 ads instead of rendering them.

        Returns:
            Dict with total_files, fixed and the first errors encountered
        """
        files = StorageService.list_files_recursive(prefix)
        fixed = 0
        errors: list[str] = []

        for path in files:
            try:
                content = StorageService.download(path)
                StorageService.upload_bytes(
                    path,
                    content,
                    content_type_for(path),
                    cache_control="3600",
                )
                fixed += 1
            except (StorageDownloadError, StorageUploadError) as e:
                logger.warning(f"Could not fix content type of {path}: {e.message}")
                errors.append(f"{path}: {e.message}")

        logger.info(f"Fixed content types for {fixed}/{len(files)} files under {prefix}")
        return {
            "success": True,
            "total_files": len(files),
            "fixed": fixed,
            "errors": errors[:MAX_REPORTED_ERRORS],
        }
