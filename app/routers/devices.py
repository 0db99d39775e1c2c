# =============================================================================
# app/routers/devices.py - Device Management Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.responses import success_response
from core.models.common import APIResponse
from core.models.device import DeviceRegisterRequest
from core.services.device_service import DeviceService

router = APIRouter()


@router.get("/list", response_model=APIResponse)
async def list_devices():
    """List registered devices."""
    devices = DeviceService.list_devices()
    return success_response({
        "total": len(devices),
        "devices": devices,
    })


@router.post("/register", response_model=APIResponse)
async def register_device(request: DeviceRegisterRequest):
    """Register a new device."""
    device = DeviceService.register_device(request)
    return success_response({
        "message": "Device registered",
        "device": device,
    })


# Declared last so /list is not captured as a device ID
@router.get("/{device_id}", response_model=APIResponse)
async def get_device(
    device_id: Annotated[str, Path(min_length=1, description="Device ID")],
):
    """Get one device's details."""
    return success_response(DeviceService.get_device(device_id))
