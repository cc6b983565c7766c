"""
MongoDB Usage Log Repository
============================

Concrete implementation of UsageLogRepository using MongoDB.

Sequence numbers come from a counters collection incremented with
find_one_and_update, so they are unique across processes.
"""
import logging
from typing import Iterator, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from home_control.domain.constants.usage_log_fields import UsageLogFields
from home_control.domain.exceptions import StorageFailureError
from home_control.domain.models.command import DeviceAction
from home_control.domain.models.usage_log_entry import UsageLogEntry
from home_control.domain.repositories.usage_log_repository import UsageLogRepository
from home_control.utils.datetime_utils import ensure_aware

logger = logging.getLogger(__name__)


class MongoUsageLogRepository(UsageLogRepository):
    """MongoDB implementation of UsageLogRepository."""

    def __init__(self, collection: Collection, counters: Collection):
        self._collection = collection
        self._counters = counters

    def ensure_indexes(self) -> None:
        try:
            self._collection.create_index([
                (UsageLogFields.DEVICE_ID, ASCENDING),
                (UsageLogFields.TIMESTAMP, ASCENDING),
                (UsageLogFields.SEQUENCE, ASCENDING),
            ])
        except PyMongoError as e:
            raise StorageFailureError(f"Could not create usage log indexes: {e}") from e

    def _next_sequence(self) -> int:
        counter = self._counters.find_one_and_update(
            {UsageLogFields.MONGO_ID: UsageLogFields.COUNTER_KEY},
            {"$inc": {UsageLogFields.COUNTER_VALUE: 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter[UsageLogFields.COUNTER_VALUE])

    def _to_entity(self, doc: dict) -> UsageLogEntry:
        return UsageLogEntry(
            device_id=doc[UsageLogFields.DEVICE_ID],
            action=DeviceAction(doc[UsageLogFields.ACTION]),
            timestamp=ensure_aware(doc[UsageLogFields.TIMESTAMP]),
            sequence=doc.get(UsageLogFields.SEQUENCE),
        )

    def append(self, entry: UsageLogEntry) -> UsageLogEntry:
        try:
            stored = entry.with_sequence(self._next_sequence())
            self._collection.insert_one({
                UsageLogFields.DEVICE_ID: stored.device_id,
                UsageLogFields.ACTION: stored.action.value,
                UsageLogFields.TIMESTAMP: stored.timestamp,
                UsageLogFields.SEQUENCE: stored.sequence,
            })
        except PyMongoError as e:
            logger.error(f"Failed to append usage entry for device {entry.device_id}: {e}")
            raise StorageFailureError(f"Could not append usage entry for '{entry.device_id}'") from e
        return stored

    def iter_entries(self, device_id: Optional[str] = None) -> Iterator[UsageLogEntry]:
        query = {} if device_id is None else {UsageLogFields.DEVICE_ID: device_id}
        try:
            cursor = self._collection.find(query).sort([
                (UsageLogFields.TIMESTAMP, ASCENDING),
                (UsageLogFields.SEQUENCE, ASCENDING),
            ])
            for doc in cursor:
                yield self._to_entity(doc)
        except PyMongoError as e:
            logger.error(f"Failed to read usage entries: {e}")
            raise StorageFailureError("Could not read usage entries") from e

    def count(self, device_id: Optional[str] = None) -> int:
        query = {} if device_id is None else {UsageLogFields.DEVICE_ID: device_id}
        try:
            return self._collection.count_documents(query)
        except PyMongoError as e:
            raise StorageFailureError("Could not count usage entries") from e
