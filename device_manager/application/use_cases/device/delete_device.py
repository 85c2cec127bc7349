# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.exceptions import DeviceConflictError, DeviceNotFoundError

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device that is not in use"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str) -> None:
        """
        Delete a device
        
        Args:
            device_id: ID of the device
            
        Raises:
            DeviceNotFoundError: If no device has this ID
            DeviceConflictError: If the device is in use
        """
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        
        if device.is_in_use():
            logger.warning(f"Refused to delete device {device_id}: device is in use")
            raise DeviceConflictError(
                "Cannot delete a device that is in use",
                details={"device_id": device_id, "state": device.state.value},
            )
        
        await self.device_repository.delete(device)
        logger.info(f"Deleted device {device_id}")
