"""
Control Service
===============

Application service for sending on/off commands to devices.
"""
from datetime import datetime
from typing import Callable, Optional

from home_control.application.use_cases.command.dispatch_command import DispatchCommandUseCase
from home_control.application.use_cases.device.apply_device_action import ApplyDeviceActionUseCase
from home_control.domain.models.command import CommandIntent, DeviceState
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.domain.repositories.usage_log_repository import UsageLogRepository
from home_control.utils.datetime_utils import now
from home_control.utils.keyed_lock import KeyedLock


class ControlService:
    """
    Application service for control operations.

    Owns one device state updater; every dispatch goes through it, so the
    per-device locks are shared by all callers of this service.

    The locks are process-local. With several worker processes on the
    MongoDB backend, each status write is still atomic, but the
    (status write, log append) pairs of different processes may interleave,
    so the usage log order can disagree with the final status. Run a single
    worker when that ordering matters.
    """

    def __init__(
        self,
        device_repository: DeviceRepository,
        usage_log_repository: UsageLogRepository,
        clock: Callable[[], datetime] = now,
        device_locks: Optional[KeyedLock] = None,
    ):
        self._updater = ApplyDeviceActionUseCase(
            device_repository,
            usage_log_repository,
            clock=clock,
            device_locks=device_locks,
        )
        self._dispatch_use_case = DispatchCommandUseCase(self._updater)

    def dispatch(self, device_id: str, action: object, source: Optional[str] = None) -> DeviceState:
        """
        Dispatch one command.

        Args:
            device_id: Target device
            action: Raw action value ('TURN_ON' or 'TURN_OFF')
            source: Optional caller tag

        Returns:
            The device's state after the command
        """
        return self.dispatch_intent(CommandIntent(device_id=device_id, action=action, source=source))

    def dispatch_intent(self, intent: CommandIntent) -> DeviceState:
        return self._dispatch_use_case.execute(intent)
