"""
Summarize Usage Use Case
========================

Per-device usage report built from the usage log.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

from home_control.domain.models.command import DeviceAction
from home_control.domain.models.usage_log_entry import UsageLogEntry
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.domain.repositories.usage_log_repository import UsageLogRepository


@dataclass
class UsageSummary:
    """Counts of recorded commands for one device."""
    device_id: str
    total: int = 0
    counts: Dict[DeviceAction, int] = field(
        default_factory=lambda: {action: 0 for action in DeviceAction}
    )
    last_entry: Optional[UsageLogEntry] = None


class SummarizeUsageUseCase:
    """Walks a device's usage entries once and tallies them."""

    def __init__(self, device_repository: DeviceRepository, usage_log_repository: UsageLogRepository):
        self._devices = device_repository
        self._usage_log = usage_log_repository

    def execute(self, device_id: str) -> UsageSummary:
        """
        Raises:
            DeviceNotFoundError: If the device is not registered
        """
        self._devices.get(device_id)

        summary = UsageSummary(device_id=device_id)
        for entry in self._usage_log.iter_entries(device_id):
            summary.total += 1
            summary.counts[entry.action] += 1
            summary.last_entry = entry
        return summary
