# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response carries a human-readable message, a machine-readable
# code and, where useful, a suggestion on how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AppectiveException(Exception):
    """
    Base exception for the Appective site API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "APPECTIVE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordNotFoundError(AppectiveException):
    """Raised when a record ID doesn't exist in its table."""

    def __init__(self, resource: str, record_id: Any):
        super().__init__(
            message=f"{resource} not found: {record_id}",
            code="NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {resource.lower()} ID is correct",
            details={"resource": resource, "id": str(record_id)}
        )


class NoFieldsToUpdateError(AppectiveException):
    """Raised when an update request carries no fields."""

    def __init__(self, resource: str):
        super().__init__(
            message=f"No fields provided to update {resource.lower()}",
            code="NO_FIELDS",
            status_code=400,
            suggestion="Send at least one field in the request body",
            details={"resource": resource}
        )


class InvalidFieldError(AppectiveException):
    """Raised when a field value is present but unacceptable."""

    def __init__(self, field: str, message: str, allowed: list[str] | None = None):
        details: dict[str, Any] = {"field": field}
        if allowed:
            details["allowed"] = allowed
        super().__init__(
            message=message,
            code="INVALID_FIELD",
            status_code=400,
            details=details
        )


class DuplicateRecordError(AppectiveException):
    """Raised when a unique value is already taken."""

    def __init__(self, resource: str, field: str, value: str):
        super().__init__(
            message=f"{resource} with this {field} already exists",
            code="DUPLICATE",
            status_code=409,
            details={"resource": resource, "field": field, "value": value}
        )


class ApplicationLimitError(AppectiveException):
    """Raised when an email has used up its applications for a job."""

    def __init__(self, job_id: str, limit: int):
        super().__init__(
            message=f"Maximum number of applications ({limit}) reached for this job with this email",
            code="APPLICATION_LIMIT",
            status_code=409,
            details={"job_id": job_id, "limit": limit}
        )


class DatabaseError(AppectiveException):
    """Raised when the managed database rejects or fails an operation."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Database error while trying to {operation}",
            code="DATABASE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"operation": operation, "error": error}
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(AppectiveException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(AppectiveException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class InvalidArchiveError(AppectiveException):
    """Raised when an uploaded ZIP cannot be read or is unsafe to extract."""

    def __init__(self, filename: str, error: str):
        super().__init__(
            message=f"Invalid ZIP archive: {error}",
            code="INVALID_ARCHIVE",
            status_code=400,
            suggestion="Upload a valid .zip file containing the HTML5 ad",
            details={"filename": filename, "error": error}
        )


class MissingEntryFileError(AppectiveException):
    """Raised when an HTML5 ad archive has no index.html at its root."""

    def __init__(self, filename: str, entry_file: str = "index.html"):
        super().__init__(
            message=f"ZIP archive must contain {entry_file} at its root",
            code="MISSING_ENTRY_FILE",
            status_code=400,
            suggestion=f"Zip the ad folder contents so {entry_file} is not inside a subfolder",
            details={"filename": filename, "entry_file": entry_file}
        )


class InvalidAssetPathError(AppectiveException):
    """Raised when a requested asset path is outside the allowed directory."""

    def __init__(self, path: str, required_prefix: str):
        super().__init__(
            message=f"Invalid path: {path}",
            code="INVALID_PATH",
            status_code=400,
            suggestion=f"Paths must point inside {required_prefix}",
            details={"path": path}
        )


class StorageUploadError(AppectiveException):
    """Raised when file upload to storage fails."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to upload file to storage: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": error}
        )


class StorageDownloadError(AppectiveException):
    """Raised when file download from storage fails."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to download file from storage: {error}",
            code="STORAGE_DOWNLOAD_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path, "error": error}
        )


class StorageListError(AppectiveException):
    """Raised when a storage folder cannot be listed."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to list storage folder: {error}",
            code="STORAGE_LIST_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path, "error": error}
        )



# =============================================================================
# Exception Handlers
# =============================================================================

async def appective_exception_handler(
    request: Request,
    exc: AppectiveException
) -> JSONResponse:
    """
    Convert AppectiveException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Missing or empty required fields are reported as 400 with the
    list of offending fields.
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Missing or invalid fields",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )
