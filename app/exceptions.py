# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error reaches the client as the standard envelope
# {"code": <status>, "message": "...", "time": "..."}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.responses import error_response

logger = logging.getLogger(__name__)


class PestDetectionException(Exception):
    """
    Base exception for the Pest Detection API.

    All custom exceptions inherit from this class. The status code doubles
    as the numeric "code" of the response envelope.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a loggable dict."""
        result = {
            "code": self.status_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestError(PestDetectionException):
    """Raised when request parameters are missing or malformed."""

    def __init__(self, message: str = "Invalid request parameters", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=400, details=details)


class UnauthorizedError(PestDetectionException):
    """Raised when a request lacks valid credentials."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message, status_code=401)


class ForbiddenError(PestDetectionException):
    """Raised when the caller may not access a resource."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message=message, status_code=403)


class NotFoundError(PestDetectionException):
    """Raised when a resource ID doesn't exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            status_code=404,
            details={"id": resource_id},
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class UnsupportedFileTypeError(PestDetectionException):
    """Raised when the declared audio type is not allowed."""

    def __init__(self, file_type: str, allowed: list[str]):
        super().__init__(
            message=f"Unsupported file type: {file_type}",
            status_code=400,
            details={"file_type": file_type, "allowed_types": allowed},
        )


class FileTooLargeError(PestDetectionException):
    """Raised when the declared file size is outside the accepted range."""

    def __init__(self, file_size: int, max_size: int):
        super().__init__(
            message="File size exceeds limit",
            status_code=400,
            details={"file_size": file_size, "max_file_size": max_size},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageUnavailableError(PestDetectionException):
    """Raised when no object storage client is available."""

    def __init__(self):
        super().__init__(message="Storage service unavailable", status_code=503)


class PresignError(PestDetectionException):
    """Raised when the storage SDK fails to sign an upload URL."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to generate presigned URL: {error}",
            status_code=500,
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def pest_detection_exception_handler(
    request: Request,
    exc: PestDetectionException
) -> JSONResponse:
    """Convert PestDetectionException to the error envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return error_response(exc.status_code, exc.message, headers=headers)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/query validation errors.

    Malformed JSON and missing required fields both land here and are
    reported as 400, not FastAPI's default 422.
    """
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return error_response(400, "Invalid request parameters: " + "; ".join(problems))


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (404 route, 405 method) in the envelope."""
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))
