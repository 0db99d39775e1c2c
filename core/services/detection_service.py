# =============================================================================
# core/services/detection_service.py - Detection Task Logic
# =============================================================================
# Accepts audio for detection and reports task results. The detection
# pipeline itself runs elsewhere; until it is connected, results and status
# are sample records.
# =============================================================================

import logging
from datetime import datetime

from app.config import settings
from app.exceptions import UnsupportedFileTypeError
from app.responses import TIME_FORMAT
from core.models.detection import (
    AudioUploadRequest,
    DetectionDetails,
    DetectionResult,
    DetectionState,
    DetectionStatus,
)
from lib.utils import generate_task_id, validate_file_type

logger = logging.getLogger(__name__)


class DetectionService:
    """Service for audio detection tasks."""

    @staticmethod
    def submit_audio(request: AudioUploadRequest, filename: str, size: int) -> dict:
        """
        Accept an uploaded recording and open a detection task.

        Args:
            request: Form fields (device_id, audio_type, timestamp)
            filename: Uploaded file name
            size: Uploaded byte count

        Returns:
            dict with task_id, device_id and upload_time

        Raises:
            UnsupportedFileTypeError: audio_type not in the allowed list
        """
        allowed = settings.allowed_audio_types_list
        if not validate_file_type(request.audio_type, allowed):
            raise UnsupportedFileTypeError(request.audio_type, allowed)

        task_id = generate_task_id()
        logger.info(
            f"Accepted audio {filename} ({size} bytes) from {request.device_id} as {task_id}"
        )
        return {
            "message": "Audio uploaded",
            "task_id": task_id,
            "device_id": request.device_id,
            "upload_time": datetime.now().strftime(TIME_FORMAT),
        }

    @staticmethod
    def get_result(task_id: str) -> DetectionResult:
        return DetectionResult(
            task_id=task_id,
            status=DetectionState.COMPLETED,
            result="Pest activity detected",
            confidence=0.85,
            detection_time=datetime.now().strftime(TIME_FORMAT),
            details=DetectionDetails(
                pest_type="red palm weevil",
                severity="moderate",
                recommendation="Inspect and treat the affected trees promptly",
            ),
        )

    @staticmethod
    def get_status(task_id: str) -> DetectionStatus:
        return DetectionStatus(
            task_id=task_id,
            status=DetectionState.PROCESSING,
            progress=75,
            estimated_time="2 minutes",
            update_time=datetime.now().strftime(TIME_FORMAT),
        )
