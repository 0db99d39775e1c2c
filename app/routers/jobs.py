# =============================================================================
# app/routers/jobs.py - Upload Job Endpoints
# =============================================================================
# Presigned upload lifecycle:
#   POST   /jobs                -> job + presigned PUT URL
#   GET    /jobs                -> paginated job list
#   GET    /jobs/{id}           -> one job
#   DELETE /jobs/{id}           -> delete job
#   POST   /jobs/{id}/complete  -> upload-finished webhook
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import StorageDep
from app.responses import success_response
from core.models.common import APIResponse
from core.models.job import (
    CreateUploadJobRequest,
    UploadCompletionNotification,
    UploadJobStatus,
)
from core.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter()

JobIdPath = Annotated[str, Path(min_length=1, description="Upload job ID")]


@router.post("", response_model=APIResponse)
async def create_upload_job(request: CreateUploadJobRequest, storage: StorageDep):
    """
    Create an upload job.

    This endpoint:
    1. Validates file type and size
    2. Builds the object key <device>/<YYYY/MM/DD/HH>/<name>_<id><ext>
    3. Signs a PUT URL carrying the job metadata

    The client then PUTs the file to upload_url with the returned
    content_type, and calls POST /jobs/{id}/complete.
    """
    return success_response(JobService.create_job(request, storage))


@router.get("", response_model=APIResponse)
async def list_upload_jobs(
    device_id: Annotated[str | None, Query(description="Filter by device")] = None,
    status: Annotated[UploadJobStatus | None, Query(description="Filter by status")] = None,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 20,
):
    """List upload jobs with optional filters."""
    return success_response(JobService.list_jobs(device_id, status, page, page_size))


@router.get("/{job_id}", response_model=APIResponse)
async def get_upload_job(job_id: JobIdPath):
    """Get an upload job's status."""
    return success_response(JobService.get_job(job_id))


@router.delete("/{job_id}", response_model=APIResponse)
async def delete_upload_job(job_id: JobIdPath):
    """Delete an upload job."""
    JobService.delete_job(job_id)
    return success_response({
        "message": "Job deleted",
        "job_id": job_id,
    })


@router.post("/{job_id}/complete", response_model=APIResponse)
async def upload_completion_webhook(
    job_id: JobIdPath,
    notification: UploadCompletionNotification,
    storage: StorageDep,
):
    """
    Upload completion callback.

    Marks the job completed. When storage is reachable and the body names
    bucket and key, the object must exist.
    """
    status = JobService.complete_job(job_id, notification, storage)
    return success_response({
        "message": "Upload completion processed",
        "job_id": job_id,
        "status": status.value,
    })
