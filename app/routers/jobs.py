# =============================================================================
# app/routers/jobs.py - Careers Endpoints
# =============================================================================
# Job openings are public to read. Applications are submitted publicly as a
# multipart form with a CV, and can only be read back from the dashboard.
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, Path, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse
from pydantic import ValidationError

from app.dependencies import AdminUser
from app.exceptions import RecordNotFoundError
from core.models.job import (
    JobApplicationCreate,
    JobApplicationResponse,
    JobApplicationStatusUpdate,
    JobOpeningCreate,
    JobOpeningResponse,
    JobOpeningUpdate,
)
from core.services.asset_service import AssetService
from core.services.job_service import JobApplicationService, JobOpeningService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Job Openings
# =============================================================================

@router.get("/job-openings", response_model=list[JobOpeningResponse])
async def list_job_openings():
    """List open positions, newest first."""
    return JobOpeningService.list_records()


@router.get("/job-openings/{job_id}", response_model=JobOpeningResponse)
async def get_job_opening(job_id: str = Path(...)):
    return JobOpeningService.get_record(job_id)


@router.post(
    "/job-openings",
    response_model=JobOpeningResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_job_opening(request: JobOpeningCreate, user: AdminUser):
    """
    Create a job opening.

    Raises:
        400: If title or full_title is missing
    """
    return JobOpeningService.create_record(request.model_dump())


@router.put("/job-openings/{job_id}", response_model=JobOpeningResponse)
async def update_job_opening(
    request: JobOpeningUpdate,
    user: AdminUser,
    job_id: str = Path(...),
):
    return JobOpeningService.update_record(job_id, request.model_dump(exclude_unset=True))


@router.delete("/job-openings/{job_id}")
async def delete_job_opening(user: AdminUser, job_id: str = Path(...)):
    JobOpeningService.delete_record(job_id)
    return {"success": True, "id": job_id}


# =============================================================================
# Job Applications
# =============================================================================

@router.post(
    "/job-applications",
    response_model=JobApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_job_application(
    job_id: str = Form(...),
    job_title: str = Form(...),
    full_name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(...),
    message: Optional[str] = Form(default=None),
    cv: UploadFile = File(..., description="CV as PDF, DOC or DOCX (max 5MB)"),
):
    """
    Apply for a job.

    Raises:
        400: If a field is missing, the email is invalid or the CV type is wrong
        409: If this email already applied twice for the job
        413: If the CV is too large
    """
    try:
        application = JobApplicationCreate(
            job_id=job_id,
            job_title=job_title,
            full_name=full_name,
            email=email,
            phone=phone,
            message=message,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    content = await cv.read()

    record = JobApplicationService.submit(
        application.model_dump(),
        cv_content=content,
        cv_filename=cv.filename or "",
    )
    logger.info(f"Received application {record['id']} for job {application.job_id}")
    return record


@router.get("/job-applications", response_model=list[JobApplicationResponse])
async def list_job_applications(user: AdminUser):
    """List every application, newest first."""
    return JobApplicationService.list_records()


@router.get("/job-applications/{application_id}", response_model=JobApplicationResponse)
async def get_job_application(user: AdminUser, application_id: str = Path(...)):
    return JobApplicationService.get_record(application_id)


@router.get("/job-applications/{application_id}/cv")
async def download_cv(user: AdminUser, application_id: str = Path(...)):
    """
    Download the CV attached to an application.

    Raises:
        404: If the application or its CV file is missing
    """
    application = JobApplicationService.get_record(application_id)
    path = AssetService.private_file(application.get("cv_file_path") or "")
    if path is None:
        raise RecordNotFoundError("CV", application_id)

    safe_name = "".join(c for c in application["full_name"] if c.isalnum() or c in " -_").strip()
    return FileResponse(path, filename=f"{safe_name or 'cv'}{path.suffix}")


@router.patch("/job-applications/{application_id}", response_model=JobApplicationResponse)
async def update_job_application_status(
    request: JobApplicationStatusUpdate,
    user: AdminUser,
    application_id: str = Path(...),
):
    """
    Move an application to another review state.

    Raises:
        400: If status is not one of pending/reviewed/contacted/accepted/rejected
        404: If application not found
    """
    return JobApplicationService.update_status(application_id, request.status)


@router.delete("/job-applications/{application_id}")
async def delete_job_application(user: AdminUser, application_id: str = Path(...)):
    """Delete an application together with its CV."""
    JobApplicationService.delete_record(application_id)
    return {"success": True, "id": application_id}
