# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.exceptions import DeviceNotFoundError
from ...dto.device_dto import DeviceResponse, to_device_response


class GetDeviceUseCase:
    """Use case for getting a device by ID"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str) -> DeviceResponse:
        """
        Get a device by ID
        
        Args:
            device_id: ID of the device
            
        Returns:
            DeviceResponse with device information
            
        Raises:
            DeviceNotFoundError: If no device has this ID
        """
        device = await self.device_repository.find_by_id(device_id)
        
        if device is None:
            raise DeviceNotFoundError(device_id)
        
        return to_device_response(device)
