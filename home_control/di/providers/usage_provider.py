from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.usage_log_repository import UsageLogRepository
from ...application.services.usage_service import UsageService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UsageProvider:
    """Usage service provider - registers usage reporting services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            UsageService,
            UsageService(
                device_repository=container.get(DeviceRepository),
                usage_log_repository=container.get(UsageLogRepository),
            )
        )
