# =============================================================================
# app/responses.py - Response Envelope Helpers
# =============================================================================
# Every endpoint answers with the same JSON envelope:
#
#   {"code": 200, "message": "Operation successful", "data": {...}, "time": "2024-01-15 10:30:00"}
#
# Errors use the same shape without "data".
# =============================================================================

from datetime import datetime
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.models.common import APIResponse

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SUCCESS_MESSAGE = "Operation successful"


def now_str() -> str:
    """Current local time in the envelope's time format."""
    return datetime.now().strftime(TIME_FORMAT)


def success_response(data: Any = None) -> APIResponse:
    """Wrap handler data in a 200 envelope."""
    return APIResponse(
        code=200,
        message=SUCCESS_MESSAGE,
        data=jsonable_encoder(data),
        time=now_str(),
    )


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an error envelope with a matching HTTP status."""
    body = APIResponse(code=status_code, message=message, time=now_str())
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )
