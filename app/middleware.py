# =============================================================================
# app/middleware.py - HTTP Middleware Chain
# =============================================================================
# Registered in app/main.py, outermost first:
#   RequestLoggerMiddleware -> RecoveryMiddleware -> RequestIDMiddleware
#   -> TimingMiddleware -> CORSMiddleware -> routes
# =============================================================================

import logging
import time
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.responses import error_response
from lib.utils import generate_request_id

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("app.access")

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"

CallNext = Callable[[Request], Awaitable[Response]]


def _format_latency(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}us"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """One access-log line per request: method, path, protocol, status, latency, client IP."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency = time.perf_counter() - start

        client_ip = request.client.host if request.client else "-"
        http_version = request.scope.get("http_version", "1.1")
        access_logger.info(
            f"{request.method} {request.url.path} HTTP/{http_version} "
            f"{response.status_code} {_format_latency(latency)} {client_ip}"
        )
        return response


class RecoveryMiddleware(BaseHTTPMiddleware):
    """
    Turn any uncaught exception into a 500 envelope.

    The error detail goes to the log only. The response keeps the request
    ID assigned further in, or the incoming one.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}: {e}")
            request_id = (
                getattr(request.state, "request_id", None)
                or request.headers.get(REQUEST_ID_HEADER)
                or generate_request_id()
            )
            return error_response(500, "Internal server error", headers={REQUEST_ID_HEADER: request_id})


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Echo X-Request-ID, or generate one, and expose it on request.state."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Add X-Response-Time and warn about slow requests."""

    def __init__(self, app, slow_threshold_ms: int = 1000):
        super().__init__(app)
        self.slow_threshold = slow_threshold_ms / 1000

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency = time.perf_counter() - start

        if latency > self.slow_threshold:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {_format_latency(latency)}"
            )

        response.headers[RESPONSE_TIME_HEADER] = _format_latency(latency)
        return response
