# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Storage backend: "memory" keeps everything in-process, "mongo" uses MongoDB
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "memory").strip().lower()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "home_control")

        # Collection Names
        self.devices_collection: Final[str] = os.getenv("DEVICES_COLLECTION", "devices")
        self.usage_logs_collection: Final[str] = os.getenv("USAGE_LOGS_COLLECTION", "usage_logs")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
