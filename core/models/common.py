# =============================================================================
# core/models/common.py - Shared Response Schemas
# =============================================================================
# The envelope every endpoint returns, and the page wrapper used by list
# endpoints.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """
    Standard response envelope.

    Example:
        {
            "code": 200,
            "message": "Operation successful",
            "data": {"job_id": "job_1a2b3c4d"},
            "time": "2024-01-15 10:30:00"
        }
    """
    code: int = Field(..., description="Mirrors the HTTP status code")
    message: str = Field(..., description="Human-readable result message")
    data: Any = Field(default=None, description="Payload (omitted on errors)")
    time: str = Field(..., description="Server time, YYYY-MM-DD HH:MM:SS")


class PaginatedResponse(BaseModel):
    """One page of a list endpoint."""
    total: int = Field(..., ge=0, description="Total matching records")
    page: int = Field(..., ge=1, description="Current page (1-based)")
    page_size: int = Field(..., ge=1, description="Records per page")
    total_pages: int = Field(..., ge=0, description="Number of pages")
    data: list[Any] = Field(default_factory=list, description="Records on this page")

    @classmethod
    def paginate(cls, items: list[Any], page: int, page_size: int) -> "PaginatedResponse":
        """Slice a full list down to the requested page."""
        total = len(items)
        total_pages = (total + page_size - 1) // page_size
        start = (page - 1) * page_size
        return cls(
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            data=items[start:start + page_size],
        )
