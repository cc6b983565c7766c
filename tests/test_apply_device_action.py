"""Tests for the device state updater."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from home_control.application.use_cases.device.apply_device_action import ApplyDeviceActionUseCase
from home_control.domain.exceptions import (
    DeviceNotFoundError,
    StorageFailureError,
    UsageLogAppendFailedError,
)
from home_control.domain.models import DeviceAction, DeviceStatus
from home_control.utils.keyed_lock import KeyedLock


@pytest.fixture
def updater(device_repository, usage_log_repository, clock):
    return ApplyDeviceActionUseCase(device_repository, usage_log_repository, clock=clock)


@pytest.mark.parametrize("action", list(DeviceAction))
@pytest.mark.parametrize("initial", list(DeviceStatus))
def test_apply_then_get_yields_target_status(updater, device_repository, lamp, action, initial):
    device_repository.set_status("lamp-1", initial)

    updater.execute("lamp-1", action)

    assert device_repository.get("lamp-1").status is action.target_status


def test_apply_returns_stored_entry(updater, usage_log_repository, lamp, clock):
    entry = updater.execute("lamp-1", DeviceAction.TURN_ON)

    assert entry.device_id == "lamp-1"
    assert entry.action is DeviceAction.TURN_ON
    assert entry.timestamp == clock.current
    assert entry.sequence == 1
    assert list(usage_log_repository.iter_entries()) == [entry]


def test_repeating_an_action_still_logs_once_more(updater, device_repository, usage_log_repository, lamp):
    updater.execute("lamp-1", DeviceAction.TURN_ON)
    updater.execute("lamp-1", DeviceAction.TURN_ON)

    assert device_repository.get("lamp-1").status is DeviceStatus.ON
    assert usage_log_repository.count("lamp-1") == 2


def test_unknown_device_logs_nothing(updater, usage_log_repository):
    with pytest.raises(DeviceNotFoundError):
        updater.execute("ghost", DeviceAction.TURN_ON)
    assert usage_log_repository.count() == 0


def test_registry_updated_before_log_append(device_repository, clock, lamp):
    calls = []
    usage_log = Mock()
    usage_log.append.side_effect = lambda entry: (
        calls.append(("append", device_repository.get("lamp-1").status)) or entry.with_sequence(1)
    )
    updater = ApplyDeviceActionUseCase(device_repository, usage_log, clock=clock)

    updater.execute("lamp-1", DeviceAction.TURN_ON)

    assert calls == [("append", DeviceStatus.ON)]


def test_failed_append_keeps_registry_change(device_repository, clock, lamp):
    usage_log = Mock()
    usage_log.append.side_effect = StorageFailureError("log store down")
    updater = ApplyDeviceActionUseCase(device_repository, usage_log, clock=clock)

    with pytest.raises(UsageLogAppendFailedError) as excinfo:
        updater.execute("lamp-1", DeviceAction.TURN_ON)

    assert excinfo.value.status is DeviceStatus.ON
    assert isinstance(excinfo.value, StorageFailureError)
    assert device_repository.get("lamp-1").status is DeviceStatus.ON


def test_failed_registry_update_appends_nothing(usage_log_repository, clock):
    devices = Mock()
    devices.get.return_value = Mock(status=DeviceStatus.OFF)
    devices.set_status.side_effect = StorageFailureError("registry down")
    updater = ApplyDeviceActionUseCase(devices, usage_log_repository, clock=clock)

    with pytest.raises(StorageFailureError):
        updater.execute("lamp-1", DeviceAction.TURN_ON)
    assert usage_log_repository.count() == 0


def test_updaters_given_one_lock_share_it(device_repository, usage_log_repository, clock, lamp):
    shared = KeyedLock()
    first = ApplyDeviceActionUseCase(device_repository, usage_log_repository, clock=clock, device_locks=shared)
    second = ApplyDeviceActionUseCase(device_repository, usage_log_repository, clock=clock, device_locks=shared)

    first.execute("lamp-1", DeviceAction.TURN_ON)
    second.execute("lamp-1", DeviceAction.TURN_OFF)

    assert first._device_locks is shared
    assert second._device_locks is shared
    assert len(shared) == 1


def test_unknown_devices_leave_no_locks_behind(device_repository, usage_log_repository, clock):
    locks = KeyedLock()
    updater = ApplyDeviceActionUseCase(device_repository, usage_log_repository, clock=clock, device_locks=locks)

    for i in range(100):
        with pytest.raises(DeviceNotFoundError):
            updater.execute(f"ghost-{i}", DeviceAction.TURN_ON)

    assert len(locks) == 0
