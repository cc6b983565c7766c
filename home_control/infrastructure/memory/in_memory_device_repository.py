"""
In-Memory Device Repository
===========================

Process-local implementation of DeviceRepository. Default backend for
development and tests.
"""
import logging
import threading
from typing import Callable, Dict, List, Optional
from datetime import datetime

from home_control.domain.exceptions import DeviceAlreadyExistsError, DeviceNotFoundError
from home_control.domain.models.device import Device, DeviceStatus
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.utils.datetime_utils import now
from home_control.utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class InMemoryDeviceRepository(DeviceRepository):
    """
    Dictionary-backed device registry.

    The table itself is guarded by one lock; each record's status write is
    guarded by its own per-device lock.
    """

    def __init__(self, clock: Callable[[], datetime] = now):
        self._devices: Dict[str, Device] = {}
        self._table_lock = threading.Lock()
        self._record_locks = KeyedLock()
        self._clock = clock

    def create(self, device: Device) -> Device:
        """Create a new device."""
        with self._table_lock:
            if device.device_id in self._devices:
                raise DeviceAlreadyExistsError(device.device_id)
            stored = device.snapshot()
            stored.created_at = self._clock()
            stored.updated_at = stored.created_at
            self._devices[device.device_id] = stored
        logger.debug(f"Stored device {device.device_id} ({stored.status.value})")
        return stored.snapshot()

    def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find a device by its ID."""
        with self._table_lock:
            stored = self._devices.get(device_id)
        if stored is None:
            return None
        with self._record_locks.hold(device_id):
            return stored.snapshot()

    def set_status(self, device_id: str, status: DeviceStatus) -> Device:
        """Atomically set the status of one device."""
        with self._table_lock:
            stored = self._devices.get(device_id)
        if stored is None:
            raise DeviceNotFoundError(device_id)
        with self._record_locks.hold(device_id):
            stored.set_status(status, at=self._clock())
            return stored.snapshot()

    def find_all(self) -> List[Device]:
        """Find all registered devices."""
        with self._table_lock:
            stored = list(self._devices.values())
        devices = []
        for device in stored:
            with self._record_locks.hold(device.device_id):
                devices.append(device.snapshot())
        return sorted(devices, key=lambda d: d.created_at)
