"""
Domain Exceptions
=================

Errors raised by the home control core. Each one is scoped to a single
request; none of them is fatal to the process.
"""


class HomeControlError(Exception):
    """Base class for all home control domain errors."""


class DeviceNotFoundError(HomeControlError):
    """Requested device identifier is not registered."""

    def __init__(self, device_id: str):
        super().__init__(f"Device '{device_id}' not found")
        self.device_id = device_id


class DeviceAlreadyExistsError(HomeControlError):
    """A device with the same identifier is already registered."""

    def __init__(self, device_id: str):
        super().__init__(f"Device '{device_id}' already exists")
        self.device_id = device_id


class InvalidActionError(HomeControlError):
    """Command action is not one of the recognized actions."""

    def __init__(self, action: object):
        super().__init__(f"Invalid action '{action}'. Expected one of: TURN_ON, TURN_OFF")
        self.action = action


class StorageFailureError(HomeControlError):
    """Device or usage log storage is unavailable."""


class UsageLogAppendFailedError(StorageFailureError):
    """
    The device status was updated but the usage entry could not be appended.

    The registry change is kept; the device's committed status is attached
    so callers can report it.
    """

    def __init__(self, device_id: str, status, cause: Exception):
        super().__init__(f"Usage log append failed for device '{device_id}': {cause}")
        self.device_id = device_id
        self.status = status
        self.__cause__ = cause


class CommandFailedError(HomeControlError):
    """A dispatch could not be completed. Callers may resubmit."""

    def __init__(self, device_id: str, reason: str):
        super().__init__(f"Command for device '{device_id}' failed: {reason}")
        self.device_id = device_id
        self.reason = reason
