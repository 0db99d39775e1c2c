# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: ID/storage-key generation and upload metadata validation
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    generate_job_id,
    generate_request_id,
    generate_storage_key,
    generate_task_id,
    get_content_type,
    validate_file_size,
    validate_file_type,
)

__all__ = [
    "generate_job_id",
    "generate_request_id",
    "generate_storage_key",
    "generate_task_id",
    "get_content_type",
    "validate_file_size",
    "validate_file_type",
]
