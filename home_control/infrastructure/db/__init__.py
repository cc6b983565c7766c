from .mongo_device_repository import MongoDeviceRepository
from .mongo_usage_log_repository import MongoUsageLogRepository

__all__ = ["MongoDeviceRepository", "MongoUsageLogRepository"]
