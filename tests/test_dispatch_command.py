"""Tests for the command dispatcher and the control service."""

from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from home_control.application.use_cases.command.dispatch_command import DispatchCommandUseCase
from home_control.domain.exceptions import (
    CommandFailedError,
    DeviceNotFoundError,
    InvalidActionError,
    StorageFailureError,
)
from home_control.domain.models import CommandIntent, DeviceAction, DeviceState, DeviceStatus


def test_lamp_end_to_end(control_service, usage_log_repository, lamp):
    state = control_service.dispatch("lamp-1", "TURN_ON")

    assert state == DeviceState(device_id="lamp-1", status=DeviceStatus.ON)
    [first] = list(usage_log_repository.iter_entries())
    assert (first.device_id, first.action) == ("lamp-1", DeviceAction.TURN_ON)

    state = control_service.dispatch("lamp-1", "TURN_ON")

    assert state.status is DeviceStatus.ON
    entries = list(usage_log_repository.iter_entries())
    assert len(entries) == 2
    assert entries[1].action is DeviceAction.TURN_ON
    assert entries[1].timestamp > first.timestamp


def test_turn_off(control_service, device_repository, lamp):
    control_service.dispatch("lamp-1", "TURN_ON")
    state = control_service.dispatch("lamp-1", "TURN_OFF")
    assert state.status is DeviceStatus.OFF
    assert device_repository.get("lamp-1").status is DeviceStatus.OFF


def test_unknown_device_returns_not_found_and_logs_nothing(control_service, usage_log_repository):
    with pytest.raises(DeviceNotFoundError):
        control_service.dispatch("ghost", "TURN_ON")
    assert usage_log_repository.count() == 0


@pytest.mark.parametrize("action", ["TOGGLE", "turn_on", "", None, 42])
def test_invalid_action_touches_nothing(action):
    updater = Mock()
    dispatcher = DispatchCommandUseCase(updater)

    with pytest.raises(InvalidActionError):
        dispatcher.execute(CommandIntent(device_id="lamp-1", action=action))

    updater.execute.assert_not_called()


def test_invalid_action_leaves_registry_and_log_unchanged(control_service, device_repository, usage_log_repository, lamp):
    with pytest.raises(InvalidActionError):
        control_service.dispatch("lamp-1", "DIM")
    assert device_repository.get("lamp-1").updated_at == lamp.updated_at
    assert usage_log_repository.count() == 0


def test_invalid_action_wins_over_unknown_device(control_service):
    with pytest.raises(InvalidActionError):
        control_service.dispatch("ghost", "DIM")


def test_blank_device_id_is_not_found():
    updater = Mock()
    with pytest.raises(DeviceNotFoundError):
        DispatchCommandUseCase(updater).execute(CommandIntent(device_id="  ", action="TURN_ON"))
    updater.execute.assert_not_called()


@pytest.mark.parametrize("error", [StorageFailureError("down"), RuntimeError("boom")])
def test_updater_errors_become_command_failed(error):
    updater = Mock()
    updater.execute.side_effect = error

    with pytest.raises(CommandFailedError) as excinfo:
        DispatchCommandUseCase(updater).execute(CommandIntent(device_id="lamp-1", action="TURN_ON"))

    assert excinfo.value.device_id == "lamp-1"
    assert excinfo.value.__cause__ is error
    updater.execute.assert_called_once_with("lamp-1", DeviceAction.TURN_ON, source=None)


def test_dispatch_is_not_retried():
    updater = Mock()
    updater.execute.side_effect = StorageFailureError("down")

    with pytest.raises(CommandFailedError):
        DispatchCommandUseCase(updater).execute(CommandIntent(device_id="lamp-1", action="TURN_OFF"))

    assert updater.execute.call_count == 1


def test_source_is_forwarded_and_logged(control_service, lamp, caplog):
    with caplog.at_level(logging.INFO, logger="home_control.application.use_cases.device.apply_device_action"):
        control_service.dispatch("lamp-1", "TURN_ON", source="mobile-app")

    assert any("source mobile-app" in record.getMessage() for record in caplog.records)
