# =============================================================================
# core/services/ - Business Logic Layer
# =============================================================================
# Services sit between API routes and external systems (object storage,
# and later the detection database).
# =============================================================================

from .detection_service import DetectionService
from .device_service import DeviceService
from .job_service import JobService
from .storage_service import MinIOStorageService, StorageService, init_storage_service

__all__ = [
    "DetectionService",
    "DeviceService",
    "JobService",
    "MinIOStorageService",
    "StorageService",
    "init_storage_service",
]
