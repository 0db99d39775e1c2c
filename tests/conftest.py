# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Replaces object storage with an in-memory fake
# - Provides a TestClient and auth headers
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SERVER_MODE", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("AUTH_ENABLED", "false")
os.environ.setdefault("STORAGE_BUCKET", "pest-detection")
os.environ.setdefault("STORAGE_EXPIRE_HOURS", "24")
os.environ.setdefault("MAX_UPLOAD_SIZE_MB", "100")

import pytest
from fastapi.testclient import TestClient

from app.auth.tokens import generate_jwt
from app.dependencies import get_storage_service
from app.main import app
from core.models.storage import FileInfo, PresignedURLParams
from core.services.storage_service import StorageService


# =============================================================================
# Fakes
# =============================================================================

class FakeStorageService(StorageService):
    """In-memory StorageService that records presign calls."""

    def __init__(self):
        self.presign_calls: list[PresignedURLParams] = []
        self.objects: dict[tuple[str, str], FileInfo] = {}
        self.presign_error: Exception | None = None
        self.exists_error: Exception | None = None

    def generate_presigned_upload_url(self, params: PresignedURLParams) -> str:
        if self.presign_error is not None:
            raise self.presign_error
        self.presign_calls.append(params)
        return f"http://storage.test/{params.bucket}/{params.key}?X-Amz-Signature=fake"

    def file_exists(self, bucket: str, key: str) -> bool:
        if self.exists_error is not None:
            raise self.exists_error
        return (bucket, key) in self.objects

    def get_file_info(self, bucket: str, key: str) -> FileInfo:
        return self.objects[(bucket, key)]

    def delete_file(self, bucket: str, key: str) -> None:
        self.objects.pop((bucket, key), None)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_storage():
    """Fake storage service injected into the app."""
    return FakeStorageService()


@pytest.fixture
def client(fake_storage):
    """TestClient with storage replaced by the fake."""
    app.dependency_overrides[get_storage_service] = lambda: fake_storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_without_storage():
    """TestClient where object storage is unavailable."""
    app.dependency_overrides[get_storage_service] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Authorization header carrying a valid token."""
    token = generate_jwt(user_id="user_tester", username="tester")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def upload_job_payload():
    """Valid POST /jobs body."""
    return {
        "device_id": "dev_001",
        "file_name": "test_audio.wav",
        "file_size": 1024000,
        "file_type": "wav",
        "content_type": "audio/wav",
        "description": "Test recording",
    }
