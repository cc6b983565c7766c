"""Concurrent dispatches against the same and different devices."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from home_control.application.services.control_service import ControlService
from home_control.domain.models import Device, DeviceStatus
from home_control.infrastructure.memory import InMemoryDeviceRepository, InMemoryUsageLogRepository
from home_control.utils.keyed_lock import KeyedLock


class InterleavingDetector(InMemoryUsageLogRepository):
    """Usage log that records when a status write and its append are split by another write."""

    def __init__(self, devices: InMemoryDeviceRepository):
        super().__init__()
        self.devices = devices
        self.mismatches = []

    def append(self, entry):
        # Give other threads a chance to sneak a status write in
        time.sleep(0.001)
        current = self.devices.get(entry.device_id).status
        if current is not entry.action.target_status:
            self.mismatches.append((entry, current))
        return super().append(entry)


def test_concurrent_applies_on_one_device_are_serialized():
    devices = InMemoryDeviceRepository()
    devices.create(Device(device_id="lamp-1", name="Lamp"))
    usage_log = InterleavingDetector(devices)
    service = ControlService(devices, usage_log)

    n = 40
    actions = ["TURN_ON" if i % 2 else "TURN_OFF" for i in range(n)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda action: service.dispatch("lamp-1", action), actions))

    entries = list(usage_log.iter_entries("lamp-1"))
    assert len(results) == n
    assert len(entries) == n
    assert usage_log.mismatches == []

    # Final state is the target of the last committed command
    last = max(entries, key=lambda e: e.sequence)
    assert devices.get("lamp-1").status is last.action.target_status


def test_different_devices_do_not_block_each_other():
    locks = KeyedLock()
    acquired_other = threading.Event()

    def hold_lamp():
        with locks.hold("lamp-1"):
            assert acquired_other.wait(timeout=2)

    def take_fan():
        with locks.hold("fan-1"):
            acquired_other.set()

    holder = threading.Thread(target=hold_lamp)
    holder.start()
    take_fan()
    holder.join(timeout=2)

    assert acquired_other.is_set()
    assert len(locks) == 2


def test_concurrent_dispatch_across_devices():
    devices = InMemoryDeviceRepository()
    usage_log = InMemoryUsageLogRepository()
    for i in range(5):
        devices.create(Device(device_id=f"plug-{i}", name=f"Plug {i}", status=DeviceStatus.OFF))
    service = ControlService(devices, usage_log)

    with ThreadPoolExecutor(max_workers=5) as pool:
        list(pool.map(lambda i: service.dispatch(f"plug-{i}", "TURN_ON"), range(5)))

    assert all(d.status is DeviceStatus.ON for d in devices.find_all())
    assert usage_log.count() == 5
