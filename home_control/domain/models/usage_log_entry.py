"""
Usage Log Entry Model
=====================

One accepted status-change command, as recorded in the usage log.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from home_control.domain.models.command import DeviceAction


@dataclass(frozen=True)
class UsageLogEntry:
    """
    Immutable usage log record.

    sequence is assigned by the log on append and breaks timestamp ties
    in insertion order. It is None until the entry has been stored.
    """
    device_id: str
    action: DeviceAction
    timestamp: datetime
    sequence: Optional[int] = None

    def with_sequence(self, sequence: int) -> "UsageLogEntry":
        return replace(self, sequence=sequence)

    def sort_key(self):
        return (self.timestamp, self.sequence if self.sequence is not None else -1)
