"""
MongoDB Device Repository
=========================

Concrete implementation of DeviceRepository using MongoDB.
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from home_control.domain.constants.device_fields import DeviceFields
from home_control.domain.exceptions import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    StorageFailureError,
)
from home_control.domain.models.device import Device, DeviceStatus
from home_control.domain.repositories.device_repository import DeviceRepository
from home_control.utils.datetime_utils import ensure_aware, now

logger = logging.getLogger(__name__)


class MongoDeviceRepository(DeviceRepository):
    """
    MongoDB implementation of DeviceRepository.

    Status writes go through find_one_and_update, which is atomic per document.
    """

    def __init__(self, collection: Collection, clock: Callable[[], datetime] = now):
        """Initialize repository with the devices collection and the clock used for timestamps."""
        self._collection = collection
        self._clock = clock

    def ensure_indexes(self) -> None:
        """Create the unique device_id index."""
        try:
            self._collection.create_index([(DeviceFields.DEVICE_ID, ASCENDING)], unique=True)
        except PyMongoError as e:
            raise StorageFailureError(f"Could not create device indexes: {e}") from e

    def _to_entity(self, doc: dict) -> Device:
        """Convert MongoDB document to Device entity."""
        return Device(
            device_id=doc[DeviceFields.DEVICE_ID],
            name=doc.get(DeviceFields.NAME) or doc[DeviceFields.DEVICE_ID],
            status=DeviceStatus(doc.get(DeviceFields.STATUS, DeviceStatus.OFF.value)),
            created_at=ensure_aware(doc.get(DeviceFields.CREATED_AT) or self._clock()),
            updated_at=ensure_aware(doc.get(DeviceFields.UPDATED_AT) or self._clock()),
        )

    def _to_document(self, device: Device) -> dict:
        """Convert Device entity to MongoDB document."""
        return {
            DeviceFields.DEVICE_ID: device.device_id,
            DeviceFields.NAME: device.name,
            DeviceFields.STATUS: device.status.value,
            DeviceFields.CREATED_AT: device.created_at,
            DeviceFields.UPDATED_AT: device.updated_at,
        }

    def create(self, device: Device) -> Device:
        """Create a new device."""
        stored = device.snapshot()
        stored.created_at = self._clock()
        stored.updated_at = stored.created_at

        try:
            self._collection.insert_one(self._to_document(stored))
        except DuplicateKeyError:
            raise DeviceAlreadyExistsError(device.device_id) from None
        except PyMongoError as e:
            logger.error(f"Failed to insert device {device.device_id}: {e}")
            raise StorageFailureError(f"Could not store device '{device.device_id}'") from e

        return stored

    def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find a device by its ID."""
        try:
            doc = self._collection.find_one({DeviceFields.DEVICE_ID: device_id})
        except PyMongoError as e:
            logger.error(f"Failed to read device {device_id}: {e}")
            raise StorageFailureError(f"Could not read device '{device_id}'") from e
        if not doc:
            return None
        return self._to_entity(doc)

    def set_status(self, device_id: str, status: DeviceStatus) -> Device:
        """Atomically set the status of one device."""
        try:
            result = self._collection.find_one_and_update(
                {DeviceFields.DEVICE_ID: device_id},
                {"$set": {
                    DeviceFields.STATUS: DeviceStatus(status).value,
                    DeviceFields.UPDATED_AT: self._clock(),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Failed to update status of device {device_id}: {e}")
            raise StorageFailureError(f"Could not update device '{device_id}'") from e

        if not result:
            raise DeviceNotFoundError(device_id)

        return self._to_entity(result)

    def find_all(self) -> List[Device]:
        """Find all registered devices."""
        try:
            docs = self._collection.find({}).sort(DeviceFields.CREATED_AT, ASCENDING)
            return [self._to_entity(doc) for doc in docs]
        except PyMongoError as e:
            logger.error(f"Failed to list devices: {e}")
            raise StorageFailureError("Could not list devices") from e

    def exists(self, device_id: str) -> bool:
        """Check if a device exists."""
        try:
            count = self._collection.count_documents({DeviceFields.DEVICE_ID: device_id}, limit=1)
        except PyMongoError as e:
            raise StorageFailureError(f"Could not read device '{device_id}'") from e
        return count > 0
