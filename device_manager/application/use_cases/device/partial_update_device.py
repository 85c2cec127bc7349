# Standard library imports
import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device
from ....domain.constants import DeviceFields
from ....domain.exceptions import (
    DeviceConflictError,
    DeviceNotFoundError,
    DeviceValidationError,
)
from ....domain.validators import violates_immutable_partial
from ...dto.device_dto import DeviceResponse, to_device_response
from .update_device import IN_USE_IDENTITY_MESSAGE

logger = logging.getLogger(__name__)

# Closed set of fields a partial update may touch, each bound to a typed setter
FIELD_SETTERS: Dict[str, Callable[[Device, Any], None]] = {
    DeviceFields.NAME: Device.update_name,
    DeviceFields.BRAND: Device.update_brand,
    DeviceFields.STATE: Device.update_state,
}

CREATION_TIME_KEYS = (DeviceFields.CREATION_TIME, DeviceFields.CREATION_TIME_LEGACY)


class PartialUpdateDeviceUseCase:
    """Use case for changing a subset of a device's fields"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str, field_changes: Mapping[str, Any]) -> DeviceResponse:
        """
        Partially update a device
        
        Checks run in this order: not found, creation time present,
        unrecognized keys, in-use identity change. Only after all of them pass
        are the supplied fields applied to a copy of the stored device, which
        is then saved. Fields not in field_changes keep their stored values.
        
        Args:
            device_id: ID of the device
            field_changes: Mapping of field name to new value
            
        Returns:
            DeviceResponse with the stored device
            
        Raises:
            DeviceNotFoundError: If no device has this ID
            DeviceConflictError: If creation time is supplied, or the device
                is in use and name or brand would change
            DeviceValidationError: If a key is not recognized or a value is invalid
        """
        existing = await self.device_repository.find_by_id(device_id)
        if existing is None:
            raise DeviceNotFoundError(device_id)
        
        if any(key in field_changes for key in CREATION_TIME_KEYS):
            logger.warning(f"Rejected partial update of device {device_id}: creation time supplied")
            raise DeviceConflictError(
                "Creation time cannot be updated",
                details={"device_id": device_id},
            )
        
        unknown_fields = sorted(key for key in field_changes if key not in FIELD_SETTERS)
        if unknown_fields:
            raise DeviceValidationError(
                f"Unrecognized field(s): {', '.join(unknown_fields)}",
                details={"fields": unknown_fields},
            )
        
        if existing.is_in_use() and violates_immutable_partial(existing, field_changes):
            logger.warning(f"Rejected partial update of in-use device {device_id}: name or brand changed")
            raise DeviceConflictError(
                IN_USE_IDENTITY_MESSAGE,
                details={"device_id": device_id},
            )
        
        updated = replace(existing)
        for field_name, value in field_changes.items():
            FIELD_SETTERS[field_name](updated, value)
        
        saved_device = await self.device_repository.save(updated)
        
        logger.info(
            f"Partially updated device {device_id} "
            f"(fields={', '.join(field_changes) or 'none'})"
        )
        
        return to_device_response(saved_device)
