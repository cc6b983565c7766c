"""
Device Service
==============

Application service for device registration and lookup.
"""
from typing import List, Optional

from home_control.application.use_cases.device.register_device import RegisterDeviceUseCase
from home_control.domain.models.device import Device, DeviceStatus
from home_control.domain.repositories.device_repository import DeviceRepository


class DeviceService:
    """
    Application service for device operations.

    Status changes do not go through here; they are made by the control
    service only.
    """

    def __init__(self, device_repository: DeviceRepository):
        """
        Initialize service with repository.

        Args:
            device_repository: Repository for device persistence
        """
        self._repository = device_repository
        self._register_use_case = RegisterDeviceUseCase(device_repository)

    def register_device(
        self,
        device_id: str,
        name: Optional[str] = None,
        status: DeviceStatus = DeviceStatus.OFF,
    ) -> Device:
        """
        Register a device.

        Args:
            device_id: Unique device identifier
            name: Optional display name
            status: Initial status

        Returns:
            Registered device entity
        """
        return self._register_use_case.execute(device_id=device_id, name=name, status=status)

    def get_device(self, device_id: str) -> Optional[Device]:
        """
        Get a device by ID.

        Returns:
            Device entity if found, None otherwise
        """
        return self._repository.find_by_id(device_id)

    def list_devices(self, status: Optional[str] = None) -> List[Device]:
        """
        List devices with an optional status filter.

        Args:
            status: Filter by status ('ON' or 'OFF')

        Returns:
            List of device entities
        """
        devices = self._repository.find_all()
        if status:
            wanted = DeviceStatus(status.strip().upper())
            devices = [dev for dev in devices if dev.status == wanted]
        return devices
