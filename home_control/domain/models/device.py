"""
Device Model
============

Domain model representing a controllable device in the home.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from home_control.utils.datetime_utils import now


class DeviceStatus(str, Enum):
    """On/off status of a device."""
    ON = "ON"
    OFF = "OFF"


@dataclass
class Device:
    """
    Device domain model.

    Holds the current known state of a device. The identifier is fixed at
    registration; the status only changes through set_status().
    """
    device_id: str
    name: str
    status: DeviceStatus = DeviceStatus.OFF
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __setattr__(self, key, value):
        if key == "device_id" and "device_id" in self.__dict__:
            raise AttributeError("Device identifier is immutable")
        if key == "status":
            value = DeviceStatus(value)
        super().__setattr__(key, value)

    def set_status(self, status: DeviceStatus, at: Optional[datetime] = None) -> None:
        """Set the on/off status."""
        self.status = status
        self.updated_at = at or now()

    def snapshot(self) -> "Device":
        """Detached copy, so callers never share a stored record."""
        return Device(
            device_id=self.device_id,
            name=self.name,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
