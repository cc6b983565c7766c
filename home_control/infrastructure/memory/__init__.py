from .in_memory_device_repository import InMemoryDeviceRepository
from .in_memory_usage_log_repository import InMemoryUsageLogRepository

__all__ = ["InMemoryDeviceRepository", "InMemoryUsageLogRepository"]
