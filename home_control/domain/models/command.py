"""
Command Models
==============

Control intents and their outcomes. None of these are persisted.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from home_control.domain.exceptions import InvalidActionError
from home_control.domain.models.device import DeviceStatus


class DeviceAction(str, Enum):
    """Actions a control intent may request."""
    TURN_ON = "TURN_ON"
    TURN_OFF = "TURN_OFF"

    @property
    def target_status(self) -> DeviceStatus:
        """Status a device ends up in after this action, whatever it was before."""
        return _TARGET_STATUS[self]

    @classmethod
    def parse(cls, raw: object) -> "DeviceAction":
        """
        Parse a raw action value.

        Raises:
            InvalidActionError: If the value is not exactly TURN_ON or TURN_OFF
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidActionError(raw)
        try:
            return cls(raw.strip())
        except ValueError:
            raise InvalidActionError(raw) from None


_TARGET_STATUS = {
    DeviceAction.TURN_ON: DeviceStatus.ON,
    DeviceAction.TURN_OFF: DeviceStatus.OFF,
}


@dataclass(frozen=True)
class CommandIntent:
    """A request to change one device's status, as decoded from the wire."""
    device_id: str
    action: object
    source: Optional[str] = None


@dataclass(frozen=True)
class DeviceState:
    """Result of a successful dispatch."""
    device_id: str
    status: DeviceStatus
