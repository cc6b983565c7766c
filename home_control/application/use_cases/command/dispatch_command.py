"""
Dispatch Command Use Case
=========================

Validates a control intent and hands it to the device state updater.
"""
import logging

from home_control.application.use_cases.device.apply_device_action import ApplyDeviceActionUseCase
from home_control.domain.exceptions import (
    CommandFailedError,
    DeviceNotFoundError,
    InvalidActionError,
)
from home_control.domain.models.command import CommandIntent, DeviceAction, DeviceState

logger = logging.getLogger(__name__)


class DispatchCommandUseCase:
    """
    Command dispatcher.

    - InvalidActionError is raised before the registry or log is touched.
    - DeviceNotFoundError passes through unchanged.
    - Any other updater failure becomes CommandFailedError.

    Nothing is retried; callers may resubmit.
    """

    def __init__(self, updater: ApplyDeviceActionUseCase):
        self._updater = updater

    def execute(self, intent: CommandIntent) -> DeviceState:
        """
        Dispatch one control intent.

        Returns:
            The device's state after the command

        Raises:
            InvalidActionError: If the action is not TURN_ON or TURN_OFF
            DeviceNotFoundError: If the device is not registered
            CommandFailedError: If the update could not be completed
        """
        try:
            action = DeviceAction.parse(intent.action)
        except InvalidActionError:
            logger.warning(f"Rejected command for device {intent.device_id}: invalid action {intent.action!r}")
            raise

        if not isinstance(intent.device_id, str) or not intent.device_id.strip():
            raise DeviceNotFoundError(str(intent.device_id))

        try:
            entry = self._updater.execute(intent.device_id, action, source=intent.source)
        except DeviceNotFoundError:
            logger.warning(f"Rejected command for unknown device {intent.device_id}")
            raise
        except Exception as e:
            logger.error(f"Command {action.value} for device {intent.device_id} failed: {e}")
            raise CommandFailedError(intent.device_id, str(e)) from e

        return DeviceState(device_id=entry.device_id, status=action.target_status)
