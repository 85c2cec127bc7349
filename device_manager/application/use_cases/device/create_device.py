# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device, DeviceState
from ....utils.datetime_utils import utc_now
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse, to_device_response

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(self, request: DeviceCreateRequest) -> DeviceResponse:
        """
        Create a new device
        
        The device always starts AVAILABLE and is stamped with the current
        time; the store assigns the id.
        
        Args:
            request: Device creation request
            
        Returns:
            DeviceResponse with created device information
            
        Raises:
            DeviceValidationError: If name or brand is blank
        """
        new_device = Device(
            id=None,
            name=request.name,
            brand=request.brand,
            state=DeviceState.AVAILABLE,
            creation_time=utc_now(),
        )
        
        saved_device = await self.device_repository.save(new_device)
        
        logger.info(f"Created device {saved_device.id} ({saved_device.brand} / {saved_device.name})")
        
        return to_device_response(saved_device)
