# =============================================================================
# tests/test_middleware.py - Middleware Chain Tests
# =============================================================================
# Request IDs, timing headers, CORS, error envelopes and panic recovery.
# =============================================================================

import logging
import re
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.middleware import (
    RecoveryMiddleware,
    RequestIDMiddleware,
    RequestLoggerMiddleware,
    TimingMiddleware,
    _format_latency,
)
from core.services.job_service import JobService


@pytest.fixture
def failing_client():
    """Small app with the recovery chain and a route that raises."""
    failing_app = FastAPI()
    failing_app.add_middleware(RequestIDMiddleware)
    failing_app.add_middleware(RecoveryMiddleware)

    @failing_app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    @failing_app.get("/silent")
    async def silent():
        raise RuntimeError()

    return TestClient(failing_app)


class TestRequestID:

    def test_generated_when_absent(self, client):
        response = client.get("/api/v1/health")
        assert re.fullmatch(r"req_\d+", response.headers["X-Request-ID"])

    def test_echoed_when_present(self, client):
        response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_present_on_errors(self, client):
        response = client.get("/api/v1/jobs", params={"page": 0})
        assert response.status_code == 400
        assert "X-Request-ID" in response.headers

    def test_echoed_on_server_error(self, client):
        with patch.object(JobService, "get_job", side_effect=RuntimeError("db down")):
            response = client.get("/api/v1/jobs/job_1", headers={"X-Request-ID": "trace-1"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "trace-1"

    def test_generated_on_server_error(self, client):
        with patch.object(JobService, "get_job", side_effect=RuntimeError("db down")):
            response = client.get("/api/v1/jobs/job_1")

        assert response.status_code == 500
        assert re.fullmatch(r"req_\d+", response.headers["X-Request-ID"])


class TestTiming:

    def test_response_time_header(self, client):
        response = client.get("/api/v1/health")
        assert re.fullmatch(r"[\d.]+(us|ms|s)", response.headers["X-Response-Time"])

    @pytest.mark.parametrize("seconds,expected", [
        (0.0005, "500us"),
        (0.0125, "12.500ms"),
        (2.5, "2.500s"),
    ])
    def test_format_latency(self, seconds, expected):
        assert _format_latency(seconds) == expected

    def test_fast_request_header_is_ascii(self):
        fast_app = FastAPI()
        fast_app.add_middleware(TimingMiddleware)

        @fast_app.get("/fast")
        async def fast():
            return {}

        client = TestClient(fast_app)
        for _ in range(20):
            assert client.get("/fast").headers["X-Response-Time"].isascii()

    def test_slow_request_warning(self, caplog):
        slow_app = FastAPI()
        slow_app.add_middleware(TimingMiddleware, slow_threshold_ms=1)

        @slow_app.get("/slow")
        async def slow():
            import asyncio
            await asyncio.sleep(0.01)
            return {}

        with caplog.at_level(logging.WARNING, logger="app.middleware"):
            TestClient(slow_app).get("/slow")

        assert any("Slow request: GET /slow" in record.message for record in caplog.records)


class TestRequestLogger:

    def test_access_log_line(self, caplog):
        logged_app = FastAPI()
        logged_app.add_middleware(RequestLoggerMiddleware)

        @logged_app.get("/ping")
        async def ping():
            return {}

        with caplog.at_level(logging.INFO, logger="app.access"):
            TestClient(logged_app).get("/ping")

        assert any(
            re.match(r"GET /ping HTTP/1\.1 200 \S+ \S+", record.message)
            for record in caplog.records
        )


class TestRecovery:

    def test_exception_becomes_500_envelope(self, failing_client):
        response = failing_client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == 500
        assert body["message"] == "Internal server error"
        assert "time" in body

    def test_exception_without_message(self, failing_client):
        response = failing_client.get("/silent")
        assert response.json()["message"] == "Internal server error"

    def test_detail_is_logged_not_returned(self, failing_client, caplog):
        with caplog.at_level(logging.ERROR, logger="app.middleware"):
            response = failing_client.get("/boom")

        assert "boom" not in response.text
        assert any("Unhandled error on GET /boom: boom" in record.message for record in caplog.records)

    def test_keeps_request_id(self, failing_client):
        response = failing_client.get("/boom", headers={"X-Request-ID": "trace-7"})
        assert response.headers["X-Request-ID"] == "trace-7"


class TestErrorEnvelope:

    def test_unknown_route(self, client):
        response = client.get("/api/v1/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == 404
        assert body["message"] == "Not Found"

    def test_method_not_allowed(self, client):
        response = client.put("/api/v1/health")
        assert response.status_code == 405
        assert response.json()["code"] == 405


class TestCORS:

    def test_preflight(self, client):
        response = client.options(
            "/api/v1/jobs",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "http://example.com"
        assert response.headers["Access-Control-Allow-Credentials"] == "true"
        assert "POST" in response.headers["Access-Control-Allow-Methods"]

    def test_simple_request(self, client):
        response = client.get("/api/v1/health", headers={"Origin": "http://example.com"})

        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.headers["Access-Control-Expose-Headers"] == "Content-Length"
