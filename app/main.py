# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Pest Detection API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   pest-detection-server
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    PestDetectionException,
    http_exception_handler,
    pest_detection_exception_handler,
    validation_exception_handler,
)
from app.middleware import (
    RecoveryMiddleware,
    RequestIDMiddleware,
    RequestLoggerMiddleware,
    TimingMiddleware,
)
from app.routers import detection, devices, health, jobs
from app.auth import require_auth_if_enabled
from app.auth import routes as auth_routes
from core.services.storage_service import init_storage_service

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup: connect object storage (optional) and log the environment.
    """
    logger.info(f"Starting Pest Detection API on port {settings.SERVER_PORT}")
    logger.info(f"Server mode: {settings.SERVER_MODE}")
    logger.info(f"Database address: {settings.DB_HOST}:{settings.DB_PORT}")
    logger.info(f"Redis address: {settings.redis_addr}")
    logger.info(f"Kafka brokers: {settings.kafka_brokers_string}")

    app.state.storage_service = init_storage_service()

    yield

    logger.info("Shutting down Pest Detection API")


# Create FastAPI application
app = FastAPI(
    title="Pest Detection API",
    description="""
## Acoustic Pest Detection Platform

Field devices record audio in orchards; this API registers devices,
accepts recordings and reports detection results.

### Uploading Recordings

1. **Create a job** - `POST /api/v1/jobs` with file metadata
2. **Upload** - `PUT` the file to the returned `upload_url` with the returned `content_type`
3. **Complete** - `POST /api/v1/jobs/{id}/complete`

```bash
curl -X POST http://localhost:8080/api/v1/jobs \\
  -H "Content-Type: application/json" \\
  -d '{"device_id": "dev_001", "file_name": "a.wav", "file_size": 1024000,
       "file_type": "wav", "content_type": "audio/wav"}'
```

Every response uses the envelope `{"code", "message", "data", "time"}`.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Login, registration and token verification"},
        {"name": "Detection", "description": "Audio detection tasks"},
        {"name": "Jobs", "description": "Presigned upload jobs"},
        {"name": "Devices", "description": "Field device management"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================
# Starlette wraps in reverse order: the last one added runs first.

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Origin",
        "Content-Type",
        "Content-Length",
        "Accept-Encoding",
        "X-CSRF-Token",
        "Authorization",
    ],
    expose_headers=["Content-Length"],
)
app.add_middleware(TimingMiddleware, slow_threshold_ms=settings.SLOW_REQUEST_THRESHOLD_MS)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(RecoveryMiddleware)
app.add_middleware(RequestLoggerMiddleware)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(PestDetectionException, pest_detection_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix=f"{API_PREFIX}/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix=API_PREFIX,
    tags=["Health"]
)

# Audio detection endpoints
app.include_router(
    detection.router,
    prefix=f"{API_PREFIX}/detection",
    tags=["Detection"],
    dependencies=[Depends(require_auth_if_enabled)],
)

# Upload job endpoints
app.include_router(
    jobs.router,
    prefix=f"{API_PREFIX}/jobs",
    tags=["Jobs"],
    dependencies=[Depends(require_auth_if_enabled)],
)

# Device management endpoints
app.include_router(
    devices.router,
    prefix=f"{API_PREFIX}/device",
    tags=["Devices"],
    dependencies=[Depends(require_auth_if_enabled)],
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Pest Detection API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": f"{API_PREFIX}/health",
    }


def run() -> None:
    """Start the API server with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        timeout_keep_alive=settings.SERVER_IDLE_TIMEOUT,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
