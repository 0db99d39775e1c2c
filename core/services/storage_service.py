# =============================================================================
# core/services/storage_service.py - Object Storage Operations
# =============================================================================
# Wraps an S3-compatible object store (MinIO in development) behind a small
# interface. Clients never stream audio through the API: they receive a
# presigned PUT URL and upload straight to the bucket.
# =============================================================================

import logging
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import settings
from core.models.storage import FileInfo, ObjectStorageConfig, PresignedURLParams

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def encode_metadata(metadata: dict[str, str]) -> dict[str, str]:
    """
    Percent-encode metadata values for x-amz-meta-* headers.

    S3 metadata must be ASCII; free text such as a recording description
    may not be. IDs, timestamps and plain ASCII text pass through unchanged.
    """
    return {key: quote(value, safe=" !#$&'()*+,/:;=?@[]~") for key, value in metadata.items()}


class StorageService(ABC):
    """Operations the API needs from object storage."""

    @abstractmethod
    def generate_presigned_upload_url(self, params: PresignedURLParams) -> str:
        """Sign a URL the client can PUT the object to."""

    @abstractmethod
    def file_exists(self, bucket: str, key: str) -> bool:
        """True if the object exists."""

    @abstractmethod
    def get_file_info(self, bucket: str, key: str) -> FileInfo:
        """Read object metadata."""

    @abstractmethod
    def delete_file(self, bucket: str, key: str) -> None:
        """Delete an object."""


class MinIOStorageService(StorageService):
    """
    StorageService backed by boto3.

    Works against MinIO and AWS S3 alike; MinIO needs path-style addressing.
    """

    def __init__(self, config: ObjectStorageConfig, client: Any | None = None):
        self.config = config
        self.client = client or boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
            region_name=config.region,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )

    def check_connection(self) -> None:
        """
        Verify credentials and endpoint by listing buckets.

        Raises:
            ClientError/BotoCoreError: If the endpoint is unreachable or rejects us
        """
        self.client.list_buckets()
        logger.info(f"Object storage ready: {self.config.endpoint_url}")

    def generate_presigned_upload_url(self, params: PresignedURLParams) -> str:
        """
        Sign a PUT for params.bucket/params.key.

        The signature covers Content-Type and the x-amz-meta-* headers, so the
        uploader must send exactly those.

        Args:
            params: Bucket, key, expiry, content type and metadata

        Returns:
            Presigned URL

        Raises:
            ClientError/BotoCoreError: If signing fails
        """
        expires = params.expires
        if expires <= timedelta(0):
            expires = timedelta(hours=self.config.expire_hours)

        request_params: dict[str, Any] = {"Bucket": params.bucket, "Key": params.key}
        if params.content_type:
            request_params["ContentType"] = params.content_type
        if params.metadata:
            request_params["Metadata"] = encode_metadata(params.metadata)

        url = self.client.generate_presigned_url(
            ClientMethod="put_object",
            Params=request_params,
            ExpiresIn=int(expires.total_seconds()),
            HttpMethod=params.method,
        )
        logger.debug(f"Presigned {params.method} for {params.bucket}/{params.key}")
        return url

    def file_exists(self, bucket: str, key: str) -> bool:
        try:
            self.client.head_object(Bucket=bucket, Key=key)
        except ClientError as e:
            if str(e.response.get("Error", {}).get("Code")) in _NOT_FOUND_CODES:
                return False
            raise
        return True

    def get_file_info(self, bucket: str, key: str) -> FileInfo:
        result = self.client.head_object(Bucket=bucket, Key=key)
        return FileInfo(
            key=key,
            size=result.get("ContentLength", 0),
            etag=result.get("ETag", "").strip('"'),
            content_type=result.get("ContentType", ""),
            last_modified=result["LastModified"],
            metadata=result.get("Metadata", {}),
        )

    def delete_file(self, bucket: str, key: str) -> None:
        self.client.delete_object(Bucket=bucket, Key=key)
        logger.info(f"Deleted object: {bucket}/{key}")


# =============================================================================
# Configuration
# =============================================================================

def load_object_storage_config() -> ObjectStorageConfig:
    """Build storage config from application settings."""
    return ObjectStorageConfig(
        provider=settings.STORAGE_PROVIDER,
        endpoint=settings.STORAGE_ENDPOINT,
        access_key=settings.STORAGE_ACCESS_KEY,
        secret_key=settings.STORAGE_SECRET_KEY,
        bucket=settings.STORAGE_BUCKET,
        region=settings.STORAGE_REGION,
        use_ssl=settings.STORAGE_USE_SSL,
        expire_hours=settings.STORAGE_EXPIRE_HOURS,
    )


def init_storage_service() -> StorageService | None:
    """
    Create the storage service and check that it answers.

    Storage is optional for the rest of the API, so a failure is logged
    and None returned instead of aborting startup.
    """
    config = load_object_storage_config()
    try:
        service = MinIOStorageService(config)
        service.check_connection()
        return service
    except (BotoCoreError, ClientError) as e:
        logger.warning(f"Object storage unavailable at {config.endpoint_url}: {e}")
        return None
