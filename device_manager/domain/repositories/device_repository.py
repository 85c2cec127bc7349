from abc import ABC, abstractmethod
from typing import Any, List, Optional
from ..models.device import Device


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""
    
    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Device]:
        """List all devices in the store's natural order"""
        pass
    
    @abstractmethod
    async def find_by_field(self, field: str, value: Any) -> List[Device]:
        """List devices whose field equals value exactly"""
        pass
    
    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (insert when id is unset, full replace otherwise)"""
        pass
    
    @abstractmethod
    async def delete(self, device: Device) -> None:
        """Remove device from the store"""
        pass
