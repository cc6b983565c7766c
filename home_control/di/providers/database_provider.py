import logging
from typing import TYPE_CHECKING

from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the database handle when the mongo backend is selected.
        The memory backend needs no connection.
        """
        if settings.storage_backend == "memory":
            logger.info("Using in-memory storage backend")
            return

        if settings.storage_backend != "mongo":
            raise ValueError(
                f"Unknown STORAGE_BACKEND '{settings.storage_backend}'. Expected 'memory' or 'mongo'"
            )

        # Imported here so the memory backend does not need a MongoDB driver at startup
        from ...infrastructure.db.mongo_connection import get_database

        container.register_singleton("mongo_database", get_database())
        logger.info(f"Using MongoDB storage backend ({settings.mongo_database_name})")
