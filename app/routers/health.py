# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import StorageDep
from app.responses import now_str

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    message: str
    time: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    storage: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    mode: str
    checks: ChecksResponse
    time: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    time: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        message="Pest detection server is running",
        time=now_str(),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(storage: StorageDep):
    """
    Readiness check endpoint.

    Upload jobs need object storage; without it the service is degraded
    but still answers every other route.
    """
    checks = ChecksResponse(storage="healthy" if storage is not None else "unavailable")

    return ReadinessResponse(
        status="ready" if storage is not None else "degraded",
        mode=settings.SERVER_MODE,
        checks=checks,
        time=now_str(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    return LivenessResponse(
        status="alive",
        time=now_str(),
    )
