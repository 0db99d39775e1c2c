# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.storage_service import StorageService


def get_storage_service(request: Request) -> StorageService | None:
    """
    Get the storage service created at startup.

    Returns None when storage could not be reached; handlers that need
    it answer 503.
    """
    return getattr(request.app.state, "storage_service", None)


# Type alias for dependency injection
StorageDep = Annotated[StorageService | None, Depends(get_storage_service)]
