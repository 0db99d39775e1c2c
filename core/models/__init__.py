# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - common.py: Response envelope and pagination
# - auth.py: Login/register bodies
# - detection.py: Audio detection tasks
# - device.py: Field devices
# - job.py: Upload jobs (presigned upload lifecycle)
# - storage.py: Object storage config, presign params, file info
#
# These models define the "contract" between API and clients.
# =============================================================================

from .common import APIResponse, PaginatedResponse
from .auth import LoginRequest, RegisterRequest
from .detection import (
    AudioUploadRequest,
    DetectionDetails,
    DetectionResult,
    DetectionState,
    DetectionStatus,
)
from .device import Device, DeviceDetail, DeviceRegisterRequest, DeviceStatus
from .job import (
    CreateUploadJobRequest,
    CreateUploadJobResponse,
    UploadCompletionNotification,
    UploadJob,
    UploadJobStatus,
)
from .storage import FileInfo, ObjectStorageConfig, PresignedURLParams

__all__ = [
    # Common
    "APIResponse",
    "PaginatedResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    # Detection
    "AudioUploadRequest",
    "DetectionDetails",
    "DetectionResult",
    "DetectionState",
    "DetectionStatus",
    # Device
    "Device",
    "DeviceDetail",
    "DeviceRegisterRequest",
    "DeviceStatus",
    # Job
    "CreateUploadJobRequest",
    "CreateUploadJobResponse",
    "UploadCompletionNotification",
    "UploadJob",
    "UploadJobStatus",
    # Storage
    "FileInfo",
    "ObjectStorageConfig",
    "PresignedURLParams",
]
