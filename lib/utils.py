# =============================================================================
# lib/utils.py - Upload Utilities
# =============================================================================
# ID/key generation and upload metadata validation shared by the job and
# detection endpoints.
# =============================================================================

import time
import uuid
from datetime import datetime
from pathlib import PurePosixPath

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB

ALLOWED_AUDIO_TYPES = ("wav", "mp3", "flac", "m4a", "aac")

CONTENT_TYPES = {
    ".wav": "audio/wav",
    ".mp3": "audio/mpeg",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
}


# =============================================================================
# ID Generation
# =============================================================================

def _short_uuid() -> str:
    return uuid.uuid4().hex[:8]


def generate_job_id() -> str:
    """
    Generate an upload job ID.

    Example:
        generate_job_id()  # "job_1a2b3c4d"
    """
    return f"job_{_short_uuid()}"


def generate_task_id() -> str:
    """Generate a detection task ID from the nanosecond clock."""
    return f"task_{time.time_ns()}"


def generate_request_id() -> str:
    return f"req_{time.time_ns()}"


def generate_storage_key(device_id: str, file_name: str, now: datetime | None = None) -> str:
    """
    Build the object key for an upload.

    Layout is <device_id>/<YYYY>/<MM>/<DD>/<HH>/<base>_<8 hex><ext>, so every
    upload gets a distinct key even when devices reuse file names.

    Args:
        device_id: Recording device ID
        file_name: Client-side file name
        now: Timestamp for the hour bucket (defaults to local now)

    Returns:
        Object key

    Example:
        generate_storage_key("dev_001", "a.wav")  # "dev_001/2024/01/15/10/a_1a2b3c4d.wav"
    """
    now = now or datetime.now()
    name = PurePosixPath(file_name).name
    # Extension starts at the last dot, so ".wav" has an empty base.
    dot = name.rfind(".")
    base, ext = (name[:dot], name[dot:]) if dot >= 0 else (name, "")
    return f"{device_id}/{now.strftime('%Y/%m/%d/%H')}/{base}_{_short_uuid()}{ext}"


# =============================================================================
# Validation
# =============================================================================

def validate_file_type(file_type: str, allowed: list[str] | tuple[str, ...] | None = None) -> bool:
    """Case-insensitive check of an audio type against the allowed list."""
    allowed = allowed if allowed is not None else ALLOWED_AUDIO_TYPES
    return file_type.strip().lower().lstrip(".") in allowed


def validate_file_size(file_size: int, max_size: int) -> bool:
    """
    Check 0 < file_size <= max_size.

    A non-positive max_size means the 100MB default.
    """
    if max_size <= 0:
        max_size = DEFAULT_MAX_FILE_SIZE
    return 0 < file_size <= max_size


def get_content_type(file_name: str) -> str:
    """Map a file name to its audio MIME type by extension."""
    ext = PurePosixPath(file_name).suffix.lower()
    return CONTENT_TYPES.get(ext, "application/octet-stream")
