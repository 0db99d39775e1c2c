# =============================================================================
# core/models/job.py - Upload Job Schemas
# =============================================================================
# These models define the API contract for the upload-job lifecycle:
# - CreateUploadJobRequest: client declares the file it wants to upload
# - CreateUploadJobResponse: job ID plus a presigned PUT URL
# - UploadCompletionNotification: webhook body once the object is stored
# - UploadJob: the job record returned by get/list
#
# Flow:
# 1. Client POSTs CreateUploadJobRequest -> gets upload_url
# 2. Client PUTs the audio straight to object storage
# 3. Storage (or the client) POSTs /jobs/{id}/complete
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class UploadJobStatus(str, Enum):
    """
    Upload job states.

    State machine:
        pending -> uploading -> completed
                           \\-> failed
        pending -> expired (presigned URL lapsed)
    """
    PENDING = "pending"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"
    EXPIRED = "expired"


class CreateUploadJobRequest(BaseModel):
    """
    Schema for creating an upload job.

    Example:
        {
            "device_id": "dev_001",
            "file_name": "orchard_a_0800.wav",
            "file_size": 1024000,
            "file_type": "wav",
            "content_type": "audio/wav",
            "description": "Morning recording"
        }
    """
    device_id: str = Field(..., min_length=1, description="Recording device ID")
    file_name: str = Field(..., min_length=1, max_length=255, description="Original file name")
    file_size: int = Field(..., gt=0, description="File size in bytes")
    file_type: str = Field(..., min_length=1, description="Audio type (wav, mp3, flac, m4a, aac)")
    content_type: str = Field(..., min_length=1, description="MIME type the upload must use")
    description: str = Field(default="", description="Free-text description")


class CreateUploadJobResponse(BaseModel):
    """Returned by POST /jobs."""
    job_id: str
    upload_url: str = Field(..., description="Presigned PUT URL")
    bucket: str
    key: str
    ttl: int = Field(..., description="Presigned URL lifetime in seconds")
    expires_at: datetime
    content_type: str = Field(..., description="Content-Type the PUT must send")
    max_file_size: int = Field(..., description="Largest accepted upload in bytes")
    required_fields: list[str]
    status: UploadJobStatus
    created_at: datetime


class UploadJob(BaseModel):
    """Upload job record."""
    id: str
    device_id: str
    file_name: str
    file_size: int
    file_type: str
    content_type: str
    description: str = ""
    bucket: str = ""
    key: str = ""
    status: UploadJobStatus
    upload_url: str = ""
    ttl: int = 0
    expires_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class UploadCompletionNotification(BaseModel):
    """
    Webhook body sent when an upload finishes.

    Every field is optional: MinIO bucket notifications and client callbacks
    carry different subsets.
    """
    job_id: str | None = None
    bucket: str | None = None
    key: str | None = None
    etag: str | None = None
    size: int | None = Field(default=None, ge=0)
    completed_at: datetime | None = None
