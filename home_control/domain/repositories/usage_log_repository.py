"""
Usage Log Repository Interface
==============================

Abstract interface for the append-only usage log.
"""
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from home_control.domain.models.usage_log_entry import UsageLogEntry


class UsageLogRepository(ABC):
    """Append-only store of usage log entries."""

    @abstractmethod
    def append(self, entry: UsageLogEntry) -> UsageLogEntry:
        """
        Append an entry.

        Args:
            entry: Entry to store (its sequence is ignored)

        Returns:
            The stored entry, carrying the sequence number the log assigned

        Raises:
            StorageFailureError: If the backing store is unavailable
        """
        pass

    @abstractmethod
    def iter_entries(self, device_id: Optional[str] = None) -> Iterator[UsageLogEntry]:
        """
        Iterate entries ordered by timestamp, ties broken by insertion order.

        The iterator is lazy and finite. Calling again starts a fresh pass.

        Args:
            device_id: Only yield entries for this device when given
        """
        pass

    @abstractmethod
    def count(self, device_id: Optional[str] = None) -> int:
        """Number of stored entries, optionally for one device."""
        pass
