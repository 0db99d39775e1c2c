# =============================================================================
# core/models/storage.py - Object Storage Schemas
# =============================================================================

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field


class ObjectStorageConfig(BaseModel):
    """Connection settings for a MinIO/S3 endpoint."""
    provider: Literal["minio", "s3"] = "minio"
    endpoint: str = "localhost:9000"
    access_key: str = "minioadmin"
    secret_key: str = "minioadmin"
    bucket: str = "pest-detection"
    region: str = "us-east-1"
    use_ssl: bool = False
    expire_hours: int = Field(default=24, ge=1)

    @property
    def endpoint_url(self) -> str:
        """Endpoint with scheme, as boto3 expects it."""
        if "://" in self.endpoint:
            return self.endpoint
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.endpoint}"


class PresignedURLParams(BaseModel):
    """What to sign. A zero `expires` means the configured default."""
    bucket: str
    key: str
    method: Literal["PUT", "POST"] = "PUT"
    expires: timedelta = timedelta(0)
    content_type: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


class FileInfo(BaseModel):
    """Metadata of a stored object."""
    key: str
    size: int
    etag: str
    content_type: str
    last_modified: datetime
    metadata: dict[str, str] = Field(default_factory=dict)
