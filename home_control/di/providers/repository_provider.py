from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.usage_log_repository import UsageLogRepository
from ...infrastructure.memory import InMemoryDeviceRepository, InMemoryUsageLogRepository
from ...utils.datetime_utils import now

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register repository implementations for the selected backend.
        Repositories already registered (e.g. by tests) are left alone.
        A "clock" registration, when present, stamps device timestamps.
        """
        clock = container.get("clock") if container.has("clock") else now

        if not container.has("mongo_database"):
            if not container.has(DeviceRepository):
                container.register_singleton(DeviceRepository, InMemoryDeviceRepository(clock=clock))
            if not container.has(UsageLogRepository):
                container.register_singleton(UsageLogRepository, InMemoryUsageLogRepository())
            return

        from ...infrastructure.db import MongoDeviceRepository, MongoUsageLogRepository

        database = container.get("mongo_database")

        # Domain interfaces -> Infrastructure implementations
        devices = MongoDeviceRepository(database[settings.devices_collection], clock=clock)
        usage_logs = MongoUsageLogRepository(
            database[settings.usage_logs_collection],
            database[settings.counters_collection],
        )
        if not container.has(DeviceRepository):
            devices.ensure_indexes()
            container.register_singleton(DeviceRepository, devices)
        if not container.has(UsageLogRepository):
            usage_logs.ensure_indexes()
            container.register_singleton(UsageLogRepository, usage_logs)
