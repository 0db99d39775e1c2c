# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - detection.py: Audio upload and detection task endpoints
# - jobs.py: Presigned upload job endpoints
# - devices.py: Device management endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import detection
from . import jobs
from . import devices

__all__ = [
    "health",
    "detection",
    "jobs",
    "devices",
]
