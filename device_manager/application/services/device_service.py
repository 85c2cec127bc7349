"""
Device Service
==============

Application service that coordinates device-related operations.
This service orchestrates the device use cases and is the single entry
point the API layer talks to.
"""
from typing import Any, List, Mapping, Optional

from ...domain.models.device import DeviceState
from ...domain.repositories.device_repository import DeviceRepository
from ..dto.device_dto import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest
from ..use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    PartialUpdateDeviceUseCase,
    UpdateDeviceUseCase,
)


class DeviceService:
    """
    Application service for device operations.

    Every method either returns the resulting device representation or
    raises a DeviceError subclass; checks always complete before the store
    is written, so a raised error means nothing was changed.
    """

    def __init__(self, device_repository: DeviceRepository):
        """
        Initialize service with repository.

        Args:
            device_repository: Repository for device persistence
        """
        self._repository = device_repository
        self._create_use_case = CreateDeviceUseCase(device_repository)
        self._get_use_case = GetDeviceUseCase(device_repository)
        self._list_use_case = ListDevicesUseCase(device_repository)
        self._update_use_case = UpdateDeviceUseCase(device_repository)
        self._partial_update_use_case = PartialUpdateDeviceUseCase(device_repository)
        self._delete_use_case = DeleteDeviceUseCase(device_repository)

    async def create_device(self, name: str, brand: str) -> DeviceResponse:
        """Create a new AVAILABLE device."""
        return await self._create_use_case.execute(DeviceCreateRequest(name=name, brand=brand))

    async def get_device(self, device_id: str) -> DeviceResponse:
        """Get a device by ID."""
        return await self._get_use_case.execute(device_id)

    async def list_devices(self) -> List[DeviceResponse]:
        """List all devices."""
        return await self._list_use_case.execute()

    async def list_devices_by_brand(self, brand: str) -> List[DeviceResponse]:
        """List devices with exactly this brand."""
        return await self._list_use_case.execute(brand=brand)

    async def list_devices_by_state(self, state: DeviceState) -> List[DeviceResponse]:
        """List devices in this state."""
        return await self._list_use_case.execute(state=state)

    async def search_devices(
        self,
        brand: Optional[str] = None,
        state: Optional[DeviceState] = None,
    ) -> List[DeviceResponse]:
        """List devices matching every filter that is given."""
        return await self._list_use_case.execute(brand=brand, state=state)

    async def update_device(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        """Replace a device's name, brand and state."""
        return await self._update_use_case.execute(device_id, request)

    async def partial_update_device(
        self,
        device_id: str,
        field_changes: Mapping[str, Any],
    ) -> DeviceResponse:
        """Change only the supplied fields of a device."""
        return await self._partial_update_use_case.execute(device_id, field_changes)

    async def delete_device(self, device_id: str) -> None:
        """Delete a device that is not in use."""
        await self._delete_use_case.execute(device_id)
