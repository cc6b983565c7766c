"""Tests for the domain models."""

from __future__ import annotations

import pytest

from home_control.domain.exceptions import InvalidActionError
from home_control.domain.models import Device, DeviceAction, DeviceStatus, UsageLogEntry


@pytest.mark.parametrize(
    "action, expected",
    [(DeviceAction.TURN_ON, DeviceStatus.ON), (DeviceAction.TURN_OFF, DeviceStatus.OFF)],
)
def test_action_target_status(action, expected):
    assert action.target_status is expected


def test_parse_accepts_known_actions_with_surrounding_whitespace():
    assert DeviceAction.parse("TURN_ON") is DeviceAction.TURN_ON
    assert DeviceAction.parse("  TURN_OFF\n") is DeviceAction.TURN_OFF
    assert DeviceAction.parse(DeviceAction.TURN_ON) is DeviceAction.TURN_ON


@pytest.mark.parametrize("raw", ["turn_on", "TOGGLE", "", "ON", None, 1])
def test_parse_rejects_anything_else(raw):
    with pytest.raises(InvalidActionError):
        DeviceAction.parse(raw)


def test_device_identifier_is_immutable():
    device = Device(device_id="lamp-1", name="Lamp")
    with pytest.raises(AttributeError):
        device.device_id = "lamp-2"
    assert device.device_id == "lamp-1"


def test_device_status_is_always_a_known_value():
    device = Device(device_id="lamp-1", name="Lamp", status="ON")
    assert device.status is DeviceStatus.ON
    with pytest.raises(ValueError):
        device.status = "DIMMED"


def test_snapshot_is_detached():
    device = Device(device_id="lamp-1", name="Lamp")
    copy = device.snapshot()
    copy.set_status(DeviceStatus.ON)
    assert device.status is DeviceStatus.OFF


def test_usage_entry_is_frozen(clock):
    entry = UsageLogEntry(device_id="lamp-1", action=DeviceAction.TURN_ON, timestamp=clock())
    with pytest.raises(AttributeError):
        entry.device_id = "other"
    assert entry.with_sequence(3).sequence == 3
    assert entry.sequence is None
