"""
Register Device Use Case
========================

Business use case for registering a new device in the registry.
"""
from typing import Optional

from home_control.domain.models.device import Device, DeviceStatus
from home_control.domain.repositories.device_repository import DeviceRepository


class RegisterDeviceUseCase:
    """
    Use case for registering a device.

    A device is registered once; its identifier never changes afterwards.
    """

    def __init__(self, device_repository: DeviceRepository):
        self._repository = device_repository

    def execute(
        self,
        device_id: str,
        name: Optional[str] = None,
        status: DeviceStatus = DeviceStatus.OFF,
    ) -> Device:
        """
        Execute the register device use case.

        Args:
            device_id: Unique device identifier
            name: Display name (defaults to the identifier)
            status: Initial status

        Returns:
            Registered device entity

        Raises:
            ValueError: If input validation fails
            DeviceAlreadyExistsError: If the identifier is taken
        """
        if not device_id or not device_id.strip():
            raise ValueError("Device ID is required")
        try:
            status = DeviceStatus(status)
        except ValueError:
            raise ValueError(f"Invalid status '{status}'. Expected ON or OFF") from None

        device_id = device_id.strip()
        display_name = name.strip() if name and name.strip() else device_id

        return self._repository.create(
            Device(device_id=device_id, name=display_name, status=status)
        )
