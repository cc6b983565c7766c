"""
Usage Service
=============

Read side of the usage log: listings and per-device summaries.
"""
from itertools import islice
from typing import List, Optional

from home_control.application.use_cases.usage.summarize_usage import SummarizeUsageUseCase, UsageSummary
from home_control.domain.models.usage_log_entry import UsageLogEntry
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.domain.repositories.usage_log_repository import UsageLogRepository


class UsageService:
    """Application service for usage reporting."""

    def __init__(self, device_repository: DeviceRepository, usage_log_repository: UsageLogRepository):
        self._usage_log = usage_log_repository
        self._summarize_use_case = SummarizeUsageUseCase(device_repository, usage_log_repository)

    def list_entries(self, device_id: Optional[str] = None, limit: Optional[int] = None) -> List[UsageLogEntry]:
        """
        List usage entries in log order.

        Args:
            device_id: Only entries for this device when given
            limit: Stop after this many entries
        """
        entries = self._usage_log.iter_entries(device_id)
        if limit is not None:
            entries = islice(entries, limit)
        return list(entries)

    def summarize(self, device_id: str) -> UsageSummary:
        return self._summarize_use_case.execute(device_id)
