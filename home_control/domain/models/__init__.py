"""Domain models."""
from .device import Device, DeviceStatus
from .command import CommandIntent, DeviceAction, DeviceState
from .usage_log_entry import UsageLogEntry

__all__ = [
    "Device",
    "DeviceStatus",
    "CommandIntent",
    "DeviceAction",
    "DeviceState",
    "UsageLogEntry",
]
