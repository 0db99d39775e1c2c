# =============================================================================
# app/routers/detection.py - Audio Detection Endpoints
# =============================================================================
# Direct audio upload for small recordings, plus task result/status.
# Large recordings should go through /jobs and a presigned URL instead.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, Path, UploadFile

from app.config import settings
from app.exceptions import FileTooLargeError, InvalidRequestError
from app.responses import success_response
from core.models.common import APIResponse
from core.models.detection import AudioUploadRequest
from core.services.detection_service import DetectionService
from lib.utils import validate_file_size

logger = logging.getLogger(__name__)

router = APIRouter()


def _upload_size(audio_file: UploadFile) -> int:
    if audio_file.size is not None:
        return audio_file.size
    audio_file.file.seek(0, 2)
    size = audio_file.file.tell()
    audio_file.file.seek(0)
    return size


@router.post("/upload", response_model=APIResponse)
async def upload_audio(
    device_id: Annotated[str, Form(min_length=1, description="Recording device ID")],
    audio_type: Annotated[str, Form(min_length=1, description="Audio type (wav, mp3, ...)")],
    audio_file: Annotated[UploadFile, File(description="Audio recording")],
    timestamp: Annotated[int | None, Form(description="Unix time of the recording")] = None,
):
    """
    Upload an audio recording for detection.

    The file is size-checked against MAX_UPLOAD_SIZE_MB without reading it
    into memory. Returns the task_id to poll with /detection/status/{id}.
    """
    size = _upload_size(audio_file)
    if size == 0:
        raise InvalidRequestError("Audio file upload failed: file is empty")

    max_size = settings.max_upload_size_bytes
    if not validate_file_size(size, max_size):
        raise FileTooLargeError(size, max_size)

    request = AudioUploadRequest(device_id=device_id, audio_type=audio_type, timestamp=timestamp)
    result = DetectionService.submit_audio(
        request,
        filename=audio_file.filename or "audio",
        size=size,
    )
    return success_response(result)


@router.get("/result/{task_id}", response_model=APIResponse)
async def get_result(
    task_id: Annotated[str, Path(min_length=1, description="Detection task ID")],
):
    """Get the detection result of a task."""
    return success_response(DetectionService.get_result(task_id))


@router.get("/status/{task_id}", response_model=APIResponse)
async def get_status(
    task_id: Annotated[str, Path(min_length=1, description="Detection task ID")],
):
    """Get the progress of a detection task."""
    return success_response(DetectionService.get_status(task_id))
