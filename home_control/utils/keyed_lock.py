"""
Keyed Lock
==========

One mutex per key, created on first use. Work for different keys never
contends; work for the same key runs one at a time.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class KeyedLock:
    """Per-key mutual exclusion (one threading.Lock per key)."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """Hold the lock for key for the duration of the with-block."""
        lock = self._lock_for(key)
        with lock:
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
