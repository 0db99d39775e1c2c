# =============================================================================
# core/services/job_service.py - Upload Job Business Logic
# =============================================================================
# Creates upload jobs (validate -> key -> presign) and serves job records.
# Jobs are not stored yet: lookups and listings return sample records.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone

from botocore.exceptions import BotoCoreError, ClientError

from app.config import settings
from app.exceptions import (
    FileTooLargeError,
    InvalidRequestError,
    PresignError,
    StorageUnavailableError,
    UnsupportedFileTypeError,
)
from core.models.common import PaginatedResponse
from core.models.job import (
    CreateUploadJobRequest,
    CreateUploadJobResponse,
    UploadCompletionNotification,
    UploadJob,
    UploadJobStatus,
)
from core.models.storage import PresignedURLParams
from core.services.storage_service import StorageService
from lib.utils import (
    generate_job_id,
    generate_storage_key,
    validate_file_size,
    validate_file_type,
)

logger = logging.getLogger(__name__)

REQUIRED_UPLOAD_FIELDS = ["file"]


class JobService:
    """
    Service for upload job operations.

    Provides a clean interface between API routes and object storage.
    """

    @staticmethod
    def create_job(
        request: CreateUploadJobRequest,
        storage: StorageService | None,
    ) -> CreateUploadJobResponse:
        """
        Create an upload job and sign its upload URL.

        Args:
            request: Declared file metadata
            storage: Storage service, or None when storage is down

        Returns:
            CreateUploadJobResponse with a presigned PUT URL

        Raises:
            UnsupportedFileTypeError: file_type not in the allowed list
            FileTooLargeError: file_size outside (0, MAX_UPLOAD_SIZE]
            StorageUnavailableError: no storage service
            PresignError: the SDK failed to sign
        """
        allowed = settings.allowed_audio_types_list
        if not validate_file_type(request.file_type, allowed):
            raise UnsupportedFileTypeError(request.file_type, allowed)

        max_size = settings.max_upload_size_bytes
        if not validate_file_size(request.file_size, max_size):
            raise FileTooLargeError(request.file_size, max_size)

        if storage is None:
            raise StorageUnavailableError()

        job_id = generate_job_id()
        key = generate_storage_key(request.device_id, request.file_name)
        created_at = datetime.now(timezone.utc)
        ttl = timedelta(hours=settings.STORAGE_EXPIRE_HOURS)

        metadata = {
            "device_id": request.device_id,
            "job_id": job_id,
            "file_type": request.file_type,
            "description": request.description,
            "upload_time": created_at.isoformat(),
        }

        try:
            upload_url = storage.generate_presigned_upload_url(PresignedURLParams(
                bucket=settings.STORAGE_BUCKET,
                key=key,
                method="PUT",
                expires=ttl,
                content_type=request.content_type,
                metadata=metadata,
            ))
        except (BotoCoreError, ClientError) as e:
            raise PresignError(str(e))

        # TODO: persist the job once the detection database is wired in
        logger.info(f"Created upload job {job_id} for device {request.device_id}: {key}")

        return CreateUploadJobResponse(
            job_id=job_id,
            upload_url=upload_url,
            bucket=settings.STORAGE_BUCKET,
            key=key,
            ttl=int(ttl.total_seconds()),
            expires_at=created_at + ttl,
            content_type=request.content_type,
            max_file_size=max_size,
            required_fields=REQUIRED_UPLOAD_FIELDS,
            status=UploadJobStatus.PENDING,
            created_at=created_at,
        )

    @staticmethod
    def get_job(job_id: str) -> UploadJob:
        """Return the job record (sample data until jobs are persisted)."""
        now = datetime.now(timezone.utc)
        return UploadJob(
            id=job_id,
            device_id="dev_001",
            file_name="audio_sample.wav",
            file_size=1024000,
            file_type="wav",
            content_type="audio/wav",
            status=UploadJobStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def _sample_jobs() -> list[UploadJob]:
        now = datetime.now(timezone.utc)
        return [
            UploadJob(
                id="job_abc123",
                device_id="dev_001",
                file_name="audio_sample.wav",
                file_size=1024000,
                file_type="wav",
                content_type="audio/wav",
                status=UploadJobStatus.COMPLETED,
                created_at=now - timedelta(hours=1),
                updated_at=now - timedelta(minutes=30),
            ),
            UploadJob(
                id="job_def456",
                device_id="dev_002",
                file_name="audio_sample.mp3",
                file_size=2048000,
                file_type="mp3",
                content_type="audio/mpeg",
                status=UploadJobStatus.PENDING,
                created_at=now - timedelta(hours=2),
                updated_at=now - timedelta(hours=2),
            ),
        ]

    @staticmethod
    def list_jobs(
        device_id: str | None = None,
        status: UploadJobStatus | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> PaginatedResponse:
        """
        List jobs, newest first, filtered by device and status.

        Args:
            device_id: Only jobs from this device
            status: Only jobs in this state
            page: 1-based page number
            page_size: Jobs per page

        Returns:
            PaginatedResponse of UploadJob
        """
        jobs = JobService._sample_jobs()
        if device_id:
            jobs = [job for job in jobs if job.device_id == device_id]
        if status:
            jobs = [job for job in jobs if job.status == status]
        jobs.sort(key=lambda job: job.created_at, reverse=True)
        return PaginatedResponse.paginate(jobs, page, page_size)

    @staticmethod
    def delete_job(job_id: str) -> None:
        logger.info(f"Deleted upload job {job_id}")

    @staticmethod
    def complete_job(
        job_id: str,
        notification: UploadCompletionNotification,
        storage: StorageService | None,
    ) -> UploadJobStatus:
        """
        Mark a job completed after the upload finished.

        When storage is reachable and the notification names an object,
        the object must exist.

        Raises:
            InvalidRequestError: job_id mismatch, or the object is missing
            StorageUnavailableError: the object check could not reach storage
        """
        if notification.job_id and notification.job_id != job_id:
            raise InvalidRequestError(
                f"Job ID mismatch: path {job_id}, body {notification.job_id}"
            )

        if storage is not None and notification.bucket and notification.key:
            try:
                exists = storage.file_exists(notification.bucket, notification.key)
            except (BotoCoreError, ClientError) as e:
                logger.error(f"Object check failed for job {job_id}: {e}")
                raise StorageUnavailableError()
            if not exists:
                raise InvalidRequestError(
                    f"Uploaded object not found: {notification.bucket}/{notification.key}"
                )

        logger.info(
            f"Upload job {job_id} completed: key={notification.key} "
            f"etag={notification.etag} size={notification.size}"
        )
        return UploadJobStatus.COMPLETED
