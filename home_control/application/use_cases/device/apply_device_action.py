"""
Apply Device Action Use Case
============================

Applies one validated on/off transition to a device and records it in the
usage log.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from home_control.domain.exceptions import UsageLogAppendFailedError
from home_control.domain.models.command import DeviceAction
from home_control.domain.models.usage_log_entry import UsageLogEntry
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.domain.repositories.usage_log_repository import UsageLogRepository
from home_control.utils.datetime_utils import now
from home_control.utils.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)


class ApplyDeviceActionUseCase:
    """
    Device state updater.

    Steps, in this order:
    1. resolve the device (DeviceNotFoundError if unknown, nothing logged)
    2. derive the target status from the action
    3. update the registry, even when the device is already at the target
    4. append a usage entry stamped by the clock
    5. return the stored entry

    Steps 3 and 4 run under a per-device lock (taken only once the device
    is known to exist), so concurrent applies on the same device produce whole (update, append) pairs one after another.
    If step 4 fails the registry change stays in place and
    UsageLogAppendFailedError is raised.
    """

    def __init__(
        self,
        device_repository: DeviceRepository,
        usage_log_repository: UsageLogRepository,
        clock: Callable[[], datetime] = now,
        device_locks: Optional[KeyedLock] = None,
    ):
        """
        Initialize use case with its collaborators.

        Args:
            device_repository: Device registry
            usage_log_repository: Usage log
            clock: Supplies timestamps for usage entries
            device_locks: Per-device locks, shared by every updater of one registry
        """
        self._devices = device_repository
        self._usage_log = usage_log_repository
        self._clock = clock
        self._device_locks = device_locks if device_locks is not None else KeyedLock()

    def execute(self, device_id: str, action: DeviceAction, source: Optional[str] = None) -> UsageLogEntry:
        """
        Apply action to device_id.

        Args:
            device_id: Target device
            action: Requested action
            source: Optional caller tag, written to the log line

        Returns:
            The usage entry recorded for this command

        Raises:
            DeviceNotFoundError: If the device is not registered
            StorageFailureError: If the registry or the log is unavailable
        """
        action = DeviceAction(action)
        target = action.target_status

        # Resolve first: unknown ids must not leave a lock behind
        device = self._devices.get(device_id)
        if device.status == target:
            logger.debug(f"Device {device_id} already {target.value}, recording {action.value} anyway")

        with self._device_locks.hold(device_id):
            updated = self._devices.set_status(device_id, target)

            entry = UsageLogEntry(device_id=device_id, action=action, timestamp=self._clock())
            try:
                stored = self._usage_log.append(entry)
            except Exception as e:
                logger.error(
                    f"Device {device_id} is now {updated.status.value} but its usage entry was not recorded: {e}"
                )
                raise UsageLogAppendFailedError(device_id, updated.status, e) from e

        logger.info(
            f"Device {device_id}: {action.value} -> {updated.status.value} "
            f"(seq {stored.sequence}, source {source or 'unknown'})"
        )
        return stored
