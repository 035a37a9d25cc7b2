# =============================================================================
# core/services/job_service.py - Careers Business Logic
# =============================================================================
# Handles job openings and the applications candidates send for them.
#
# Applications carry personal data: they are only readable from the
# dashboard, and CVs are stored outside the public directory.
# =============================================================================

import logging
from typing import Any
from uuid import uuid4

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import generate_job_id
from app.exceptions import ApplicationLimitError, DatabaseError
from core.models.job import ApplicationStatus
from core.services.asset_service import AssetService
from core.services.base import RecordService

logger = logging.getLogger(__name__)

# How many times one email may apply to the same job
MAX_APPLICATIONS_PER_JOB = 2


class JobOpeningService(RecordService):
    table = "job_openings"
    resource = "Job opening"
    order_by = "created_at"
    descending = True

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        data["id"] = generate_job_id()
        return data


class JobApplicationService(RecordService):
    table = "job_applications"
    resource = "Job application"
    order_by = "created_at"
    descending = True

    @classmethod
    def prepare_create(cls, data: dict[str, Any]) -> dict[str, Any]:
        data.setdefault("id", str(uuid4()))
        data.setdefault("status", ApplicationStatus.PENDING.value)
        return data

    @classmethod
    def count_applications(cls, email: str, job_id: str) -> int:
        try:
            return SupabaseClient.count_rows(
                cls.table, filters={"email": email, "job_id": job_id}
            )
        except SupabaseClientError as e:
            logger.error(f"Failed to count applications for job {job_id}: {e}")
            raise DatabaseError("check previous applications", e.message)

    @classmethod
    def submit(
        cls,
        application: dict[str, Any],
        cv_content: bytes,
        cv_filename: str,
    ) -> dict[str, Any]:
        """
        Store a candidate's application and CV.

        Args:
            application: Validated form fields (job_id, email, ...)
            cv_content: Raw CV bytes
            cv_filename: Original CV filename, used for its extension

        Returns:
            The stored application row (status "pending")

        Raises:
            ApplicationLimitError: If this email already applied twice to the job
            InvalidFileTypeError: If the CV is not PDF/DOC/DOCX
            FileTooLargeError: If the CV is over the size limit
        """
        AssetService.validate_cv(cv_filename, len(cv_content))

        previous = cls.count_applications(application["email"], application["job_id"])
        if previous >= MAX_APPLICATIONS_PER_JOB:
            logger.info(
                f"Application limit reached for {application['email']} on job {application['job_id']}"
            )
            raise ApplicationLimitError(application["job_id"], MAX_APPLICATIONS_PER_JOB)

        cv_path = AssetService.save_cv(cv_content, cv_filename)

        try:
            return cls.create_record({**application, "cv_file_path": cv_path})
        except DatabaseError:
            AssetService.delete_private_file(cv_path)
            raise

    @classmethod
    def update_status(cls, application_id: str, status: ApplicationStatus) -> dict[str, Any]:
        return cls.update_record(application_id, {"status": status.value})

    @classmethod
    def delete_record(cls, record_id: Any) -> None:
        """Delete an application and its stored CV."""
        application = cls.get_record(record_id)
        super().delete_record(record_id)

        if application.get("cv_file_path"):
            AssetService.delete_private_file(application["cv_file_path"])
