"""
MongoDB Connection
==================

Single entry-point for the MongoDB database handle.

Config:
- MONGO_URI, DB_NAME (see home_control.core.config)
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from home_control.core.config import get_settings

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """
    Get the shared MongoClient (created lazily, connects on first operation).

    Returns:
        MongoClient instance
    """
    global _client
    if _client is None:
        settings = get_settings()
        # tz_aware so timestamps come back with their UTC offset
        _client = MongoClient(settings.mongo_uri, tz_aware=True)
        logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _client


def get_database(client: Optional[MongoClient] = None) -> Database:
    """Return the configured application database."""
    client = client or get_mongo_client()
    return client[get_settings().mongo_database_name]


def close_mongo_client() -> None:
    """Close the shared client, if one was created."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")
