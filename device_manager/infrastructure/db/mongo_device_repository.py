# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...domain.constants import DeviceFields
from ...domain.exceptions import DeviceStoreError
from ...utils.datetime_utils import mongo_datetime_to_utc
from .mongo_connection import get_device_collection

logger = logging.getLogger(__name__)


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find device by ID

        Args:
            device_id: The device ID to find

        Returns:
            Device domain model if found, None otherwise
        """
        object_id = self._to_object_id(device_id)
        if object_id is None:
            # Ids are always ObjectIds, so anything else cannot match
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise DeviceStoreError(f"Error finding device by ID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_device(document)

    async def find_all(self) -> List[Device]:
        """
        List all devices

        Returns:
            List of Device domain models in insertion order
        """
        return await self._find({})

    async def find_by_field(self, field: str, value: Any) -> List[Device]:
        """
        List devices whose field equals value

        Args:
            field: One of the DeviceFields names
            value: Exact value to match

        Returns:
            List of Device domain models in insertion order
        """
        if isinstance(value, DeviceState):
            value = value.value
        return await self._find({field: value})

    async def save(self, device: Device) -> Device:
        """
        Save device (create new or replace existing)

        Args:
            device: Device domain model to save

        Returns:
            Saved Device domain model with ID set
        """
        if not device:
            raise ValueError("Device cannot be None")

        device_dict = self._device_to_dict(device)

        try:
            if device.id:
                object_id = self._to_object_id(device.id)
                if object_id is None:
                    raise DeviceStoreError(f"Invalid device id: {device.id}")

                replace_result = await self.device_collection.replace_one(
                    {DeviceFields.MONGO_ID: object_id},
                    device_dict,
                )
                if replace_result.matched_count == 0:
                    raise DeviceStoreError(f"Device {device.id} no longer exists in the store")
                updated_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise DeviceStoreError(f"Device {device.id} was saved but could not be retrieved")
                return self._document_to_device(updated_document)

            # Create new device
            result = await self.device_collection.insert_one(device_dict)

            new_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise DeviceStoreError("Device was created but could not be retrieved")

            logger.debug(f"Inserted device document {result.inserted_id}")
            return self._document_to_device(new_document)
        except PyMongoError as e:
            raise DeviceStoreError(f"Error saving device: {str(e)}") from e

    async def delete(self, device: Device) -> None:
        """
        Delete device

        Args:
            device: Device domain model to remove
        """
        object_id = self._to_object_id(device.id)
        if object_id is None:
            return

        try:
            await self.device_collection.delete_one({DeviceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise DeviceStoreError(f"Error deleting device: {str(e)}") from e

    async def _find(self, query: Dict[str, Any]) -> List[Device]:
        try:
            cursor = self.device_collection.find(query).sort(DeviceFields.MONGO_ID, ASCENDING)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except PyMongoError as e:
            raise DeviceStoreError(f"Error listing devices: {str(e)}") from e

    @staticmethod
    def _to_object_id(device_id: Optional[str]) -> Optional[ObjectId]:
        if not device_id:
            return None
        try:
            return ObjectId(device_id)
        except (InvalidId, ValueError, TypeError):
            return None

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """
        Convert MongoDB document to Device domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Device domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return Device(
            id=str(document[DeviceFields.MONGO_ID]),
            name=document.get(DeviceFields.NAME, ""),
            brand=document.get(DeviceFields.BRAND, ""),
            state=document.get(DeviceFields.STATE, DeviceState.AVAILABLE.value),
            creation_time=mongo_datetime_to_utc(document.get(DeviceFields.CREATION_TIME)),
        )

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """
        Convert Device domain model to MongoDB document

        The _id is never part of the body; it is only used as the filter.

        Args:
            device: Device domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
            DeviceFields.CREATION_TIME: device.creation_time,
        }
