"""
In-Memory Usage Log Repository
==============================

Process-local implementation of UsageLogRepository.
"""
import threading
from typing import Iterator, List, Optional

from home_control.domain.models.usage_log_entry import UsageLogEntry
from home_control.domain.repositories.usage_log_repository import UsageLogRepository


class InMemoryUsageLogRepository(UsageLogRepository):
    """List-backed append-only log."""

    def __init__(self) -> None:
        self._entries: List[UsageLogEntry] = []
        self._lock = threading.Lock()
        self._next_sequence = 1

    def append(self, entry: UsageLogEntry) -> UsageLogEntry:
        with self._lock:
            stored = entry.with_sequence(self._next_sequence)
            self._next_sequence += 1
            self._entries.append(stored)
        return stored

    def iter_entries(self, device_id: Optional[str] = None) -> Iterator[UsageLogEntry]:
        # Snapshot under the lock, then yield lazily from the copy
        with self._lock:
            entries = list(self._entries)
        entries.sort(key=UsageLogEntry.sort_key)
        for entry in entries:
            if device_id is None or entry.device_id == device_id:
                yield entry

    def count(self, device_id: Optional[str] = None) -> int:
        with self._lock:
            if device_id is None:
                return len(self._entries)
            return sum(1 for e in self._entries if e.device_id == device_id)
