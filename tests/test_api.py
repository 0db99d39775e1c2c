# =============================================================================
# tests/test_api.py - Endpoint Tests
# =============================================================================
# Health, detection and device endpoints through TestClient.
# =============================================================================

import re

from app.config import settings


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["message"] == "Pest detection server is running"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", body["time"])

    def test_live(self, client):
        assert client.get("/api/v1/health/live").json()["status"] == "alive"

    def test_ready_with_storage(self, client):
        body = client.get("/api/v1/health/ready").json()
        assert body["status"] == "ready"
        assert body["checks"]["storage"] == "healthy"

    def test_degraded_without_storage(self, client_without_storage):
        body = client_without_storage.get("/api/v1/health/ready").json()
        assert body["status"] == "degraded"
        assert body["checks"]["storage"] == "unavailable"

    def test_root(self, client):
        body = client.get("/").json()
        assert body["health"] == "/api/v1/health"


# =============================================================================
# Detection
# =============================================================================

class TestDetectionUpload:

    def test_upload_audio(self, client):
        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "wav", "timestamp": "1640995200"},
            files={"audio_file": ("sample.wav", b"RIFF\x00\x00\x00\x00WAVE", "audio/wav")},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert re.fullmatch(r"task_\d+", data["task_id"])
        assert data["device_id"] == "dev_001"
        assert "upload_time" in data

    def test_missing_file(self, client):
        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "wav"},
        )

        assert response.status_code == 400
        assert "audio_file" in response.json()["message"]

    def test_empty_file(self, client):
        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "wav"},
            files={"audio_file": ("sample.wav", b"", "audio/wav")},
        )
        assert response.status_code == 400

    def test_oversize_file(self, client, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)

        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "wav"},
            files={"audio_file": ("long.wav", b"\x00" * (3 * 1024 * 1024), "audio/wav")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "File size exceeds limit"

    def test_file_at_limit_accepted(self, client, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)

        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "wav"},
            files={"audio_file": ("a.wav", b"\x00" * (1024 * 1024), "audio/wav")},
        )
        assert response.status_code == 200

    def test_missing_device_id(self, client):
        response = client.post(
            "/api/v1/detection/upload",
            data={"audio_type": "wav"},
            files={"audio_file": ("sample.wav", b"RIFF", "audio/wav")},
        )
        assert response.status_code == 400

    def test_unsupported_audio_type(self, client):
        response = client.post(
            "/api/v1/detection/upload",
            data={"device_id": "dev_001", "audio_type": "txt"},
            files={"audio_file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Unsupported file type: txt"


class TestDetectionResult:

    def test_result(self, client):
        response = client.get("/api/v1/detection/result/task_123")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Operation successful"
        assert body["data"]["task_id"] == "task_123"
        assert body["data"]["status"] == "completed"
        assert 0 <= body["data"]["confidence"] <= 1
        assert set(body["data"]["details"]) == {"pest_type", "severity", "recommendation"}

    def test_status(self, client):
        response = client.get("/api/v1/detection/status/task_123")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["task_id"] == "task_123"
        assert data["status"] == "processing"
        assert data["progress"] == 75


# =============================================================================
# Devices
# =============================================================================

class TestDevices:

    def test_device_list(self, client):
        response = client.get("/api/v1/device/list")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 2
        assert [d["device_id"] for d in data["devices"]] == ["dev_001", "dev_002"]
        assert [d["status"] for d in data["devices"]] == ["online", "offline"]

    def test_device_info(self, client):
        response = client.get("/api/v1/device/dev_007")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["device_id"] == "dev_007"
        assert data["firmware_version"] == "v1.2.3"
        assert data["total_detections"] == 156

    def test_register_device(self, client):
        response = client.post(
            "/api/v1/device/register",
            json={"device_id": "dev_003", "device_name": "Detector C", "location": "Orchard zone C"},
        )

        assert response.status_code == 200
        device = response.json()["data"]["device"]
        assert device["device_id"] == "dev_003"
        assert device["location"] == "Orchard zone C"
        assert device["status"] == "registered"
        assert "register_time" in device

    def test_register_requires_name(self, client):
        response = client.post("/api/v1/device/register", json={"device_id": "dev_003"})

        assert response.status_code == 400
        assert "device_name" in response.json()["message"]
