# =============================================================================
# core/models/device.py - Device Schemas
# =============================================================================
# Field detection devices (the microphones deployed in orchards).
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class DeviceStatus(str, Enum):
    """Reported device state."""
    ONLINE = "online"
    OFFLINE = "offline"
    REGISTERED = "registered"


class DeviceRegisterRequest(BaseModel):
    """
    Schema for registering a device.

    Example:
        {"device_id": "dev_003", "device_name": "Detector C", "location": "Orchard C"}
    """
    device_id: str = Field(..., min_length=1, max_length=64)
    device_name: str = Field(..., min_length=1, max_length=128)
    location: str = Field(default="", max_length=255)


class Device(BaseModel):
    """Device summary as returned by the list endpoint."""
    device_id: str
    device_name: str
    location: str
    status: DeviceStatus
    last_active: str


class DeviceDetail(Device):
    """Full device record."""
    firmware_version: str
    last_maintenance: str
    total_detections: int = Field(default=0, ge=0)
