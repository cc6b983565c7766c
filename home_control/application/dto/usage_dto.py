"""
Usage DTO
=========

Pydantic models for usage log responses.
"""
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel

from home_control.application.use_cases.usage.summarize_usage import UsageSummary
from home_control.domain.models.command import DeviceAction
from home_control.domain.models.usage_log_entry import UsageLogEntry


class UsageLogEntryResponse(BaseModel):
    """DTO for one usage entry."""
    device_id: str
    action: DeviceAction
    timestamp: datetime
    sequence: Optional[int] = None

    @classmethod
    def from_entity(cls, entry: UsageLogEntry) -> "UsageLogEntryResponse":
        return cls(
            device_id=entry.device_id,
            action=entry.action,
            timestamp=entry.timestamp,
            sequence=entry.sequence,
        )


class UsageSummaryResponse(BaseModel):
    """DTO for a per-device usage summary."""
    device_id: str
    total: int
    counts: Dict[str, int]
    last_entry: Optional[UsageLogEntryResponse] = None

    @classmethod
    def from_summary(cls, summary: UsageSummary) -> "UsageSummaryResponse":
        return cls(
            device_id=summary.device_id,
            total=summary.total,
            counts={action.value: count for action, count in summary.counts.items()},
            last_entry=(
                UsageLogEntryResponse.from_entity(summary.last_entry)
                if summary.last_entry else None
            ),
        )
