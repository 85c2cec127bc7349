# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import DeviceState
from ....domain.constants import DeviceFields
from ...dto.device_dto import DeviceResponse, to_device_response


class ListDevicesUseCase:
    """Use case for listing devices, optionally filtered by brand and/or state"""
    
    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository
    
    async def execute(
        self,
        brand: Optional[str] = None,
        state: Optional[DeviceState] = None,
    ) -> List[DeviceResponse]:
        """
        List devices in the store's natural order
        
        Brand matching is exact and case-sensitive. When both filters are
        given the brand listing is narrowed down to the requested state.
        
        Args:
            brand: Only devices with exactly this brand
            state: Only devices in this state
            
        Returns:
            List of DeviceResponse objects, possibly empty
        """
        if brand is not None:
            devices = await self.device_repository.find_by_field(DeviceFields.BRAND, brand)
            if state is not None:
                devices = [device for device in devices if device.state == state]
        elif state is not None:
            devices = await self.device_repository.find_by_field(DeviceFields.STATE, state)
        else:
            devices = await self.device_repository.find_all()
        
        return [to_device_response(device) for device in devices]
