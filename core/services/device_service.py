# =============================================================================
# core/services/device_service.py - Device Business Logic
# =============================================================================
# Device records are not stored yet; these methods return sample data
# shaped like the future device table.
# =============================================================================

import logging
from datetime import datetime, timedelta

from app.responses import TIME_FORMAT
from core.models.device import Device, DeviceDetail, DeviceRegisterRequest, DeviceStatus

logger = logging.getLogger(__name__)


def _ago(delta: timedelta) -> str:
    return (datetime.now() - delta).strftime(TIME_FORMAT)


class DeviceService:
    """Service for device management operations."""

    @staticmethod
    def list_devices() -> list[Device]:
        return [
            Device(
                device_id="dev_001",
                device_name="Detector A",
                location="Orchard zone A",
                status=DeviceStatus.ONLINE,
                last_active=_ago(timedelta(minutes=5)),
            ),
            Device(
                device_id="dev_002",
                device_name="Detector B",
                location="Orchard zone B",
                status=DeviceStatus.OFFLINE,
                last_active=_ago(timedelta(hours=2)),
            ),
        ]

    @staticmethod
    def get_device(device_id: str) -> DeviceDetail:
        return DeviceDetail(
            device_id=device_id,
            device_name="Detector A",
            location="Orchard zone A",
            status=DeviceStatus.ONLINE,
            firmware_version="v1.2.3",
            last_maintenance="2024-01-15",
            total_detections=156,
            last_active=_ago(timedelta(minutes=5)),
        )

    @staticmethod
    def register_device(request: DeviceRegisterRequest) -> dict:
        """
        Register a device.

        Returns:
            The new device record with register_time and status
        """
        logger.info(f"Registered device {request.device_id} ({request.device_name})")
        return {
            "device_id": request.device_id,
            "device_name": request.device_name,
            "location": request.location,
            "register_time": datetime.now().strftime(TIME_FORMAT),
            "status": DeviceStatus.REGISTERED.value,
        }
