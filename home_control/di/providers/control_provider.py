from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.usage_log_repository import UsageLogRepository
from ...application.services.control_service import ControlService
from ...utils.datetime_utils import now
from ...utils.keyed_lock import KeyedLock

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ControlProvider:
    """Control service provider - wires the dispatcher to the registry, log and clock"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register control service.
        A "clock" registration, when present, replaces the system clock.
        """
        clock = container.get("clock") if container.has("clock") else now

        container.register_singleton(
            ControlService,
            ControlService(
                device_repository=container.get(DeviceRepository),
                usage_log_repository=container.get(UsageLogRepository),
                clock=clock,
                device_locks=KeyedLock(),
            )
        )
