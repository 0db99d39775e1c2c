# =============================================================================
# core/models/detection.py - Detection Schemas
# =============================================================================
# Audio detection tasks: the upload form and the result/status records.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class DetectionState(str, Enum):
    """Detection task states."""
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class AudioUploadRequest(BaseModel):
    """
    Form fields that accompany an uploaded audio file.

    The audio itself arrives as the multipart part "audio_file".
    """
    device_id: str = Field(..., min_length=1)
    audio_type: str = Field(..., min_length=1)
    timestamp: int | None = Field(default=None, description="Unix time of the recording")


class DetectionDetails(BaseModel):
    pest_type: str
    severity: str
    recommendation: str


class DetectionResult(BaseModel):
    """Result of a finished detection task."""
    task_id: str
    status: DetectionState
    result: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    detection_time: str
    details: DetectionDetails


class DetectionStatus(BaseModel):
    """Progress of a running detection task."""
    task_id: str
    status: DetectionState
    progress: int = Field(..., ge=0, le=100)
    estimated_time: str
    update_time: str
