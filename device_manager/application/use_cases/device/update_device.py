# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device
from ....domain.exceptions import DeviceConflictError, DeviceNotFoundError
from ....domain.validators import violates_immutable_full
from ...dto.device_dto import DeviceUpdateRequest, DeviceResponse, to_device_response

logger = logging.getLogger(__name__)

IN_USE_IDENTITY_MESSAGE = "Cannot update name or brand of a device that is in use"


class UpdateDeviceUseCase:
    """Use case for replacing every mutable field of a device"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        """
        Fully update a device
        
        The id and creation_time in the request are ignored: the path id and
        the stored creation_time always win. State is replaced unconditionally,
        so an in-use device can be released in the same call that keeps its
        name and brand.
        
        Args:
            device_id: ID of the device
            request: Replacement device details
            
        Returns:
            DeviceResponse with the stored device
            
        Raises:
            DeviceValidationError: If name or brand is blank
            DeviceNotFoundError: If no device has this ID
            DeviceConflictError: If the device is in use and name or brand differ
        """
        # Payload validation happens before the store is touched
        proposed = Device(
            id=device_id,
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
        
        existing = await self.device_repository.find_by_id(device_id)
        if existing is None:
            raise DeviceNotFoundError(device_id)
        
        proposed.creation_time = existing.creation_time
        
        if existing.is_in_use() and violates_immutable_full(existing, proposed):
            logger.warning(f"Rejected full update of in-use device {device_id}: name or brand changed")
            raise DeviceConflictError(
                IN_USE_IDENTITY_MESSAGE,
                details={"device_id": device_id},
            )
        
        saved_device = await self.device_repository.save(proposed)
        
        logger.info(f"Updated device {device_id} (state={saved_device.state.value})")
        
        return to_device_response(saved_device)
