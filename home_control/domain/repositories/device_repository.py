"""
Device Repository Interface
===========================

Abstract interface for the device registry.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from home_control.domain.exceptions import DeviceNotFoundError
from home_control.domain.models.device import Device, DeviceStatus


class DeviceRepository(ABC):
    """
    Abstract repository for device persistence operations.

    Implementations must make set_status() atomic per device and must hand
    out detached copies, never the stored record itself.
    """

    @abstractmethod
    def create(self, device: Device) -> Device:
        """
        Create a new device.

        Args:
            device: Device entity to create

        Returns:
            Created device entity

        Raises:
            DeviceAlreadyExistsError: If the identifier is already registered
        """
        pass

    @abstractmethod
    def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find a device by its ID.

        Args:
            device_id: Unique device identifier

        Returns:
            Device entity if found, None otherwise
        """
        pass

    @abstractmethod
    def set_status(self, device_id: str, status: DeviceStatus) -> Device:
        """
        Atomically set the status of one device.

        Args:
            device_id: Unique device identifier
            status: New status

        Returns:
            Updated device entity

        Raises:
            DeviceNotFoundError: If no device has this identifier
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Device]:
        """
        Find all registered devices.

        Returns:
            List of device entities, oldest registration first
        """
        pass

    def get(self, device_id: str) -> Device:
        """
        Get a device by its ID.

        Raises:
            DeviceNotFoundError: If no device has this identifier
        """
        device = self.find_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    def exists(self, device_id: str) -> bool:
        """Check if a device exists."""
        return self.find_by_id(device_id) is not None
