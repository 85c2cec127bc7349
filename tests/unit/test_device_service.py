"""
Scenario tests for DeviceService running against the in-memory store.
"""
import pytest

from device_manager.application.dto.device_dto import DeviceUpdateRequest
from device_manager.domain.exceptions import DeviceConflictError, DeviceNotFoundError
from device_manager.domain.models.device import DeviceState


class TestDeviceServiceScenarios:
    """End-to-end lifecycle checks through the service facade"""

    @pytest.mark.asyncio
    async def test_in_use_device_keeps_identity(self, device_service):
        created = await device_service.create_device("Device1", "BrandA")
        assert created.state == DeviceState.AVAILABLE
        assert created.creation_time is not None

        in_use = await device_service.partial_update_device(created.id, {"state": "IN_USE"})
        assert in_use.state == DeviceState.IN_USE

        with pytest.raises(DeviceConflictError):
            await device_service.update_device(
                created.id,
                DeviceUpdateRequest(name="Changed", brand="BrandA", state=DeviceState.IN_USE),
            )
        unchanged = await device_service.get_device(created.id)
        assert unchanged.name == "Device1"
        assert unchanged.state == DeviceState.IN_USE

        released = await device_service.partial_update_device(created.id, {"state": "AVAILABLE"})
        assert released.state == DeviceState.AVAILABLE
        assert released.name == "Device1"
        assert released.brand == "BrandA"
        assert released.creation_time == created.creation_time

    @pytest.mark.asyncio
    async def test_list_by_brand_in_store_order(self, device_service):
        first = await device_service.create_device("Phone", "BrandA")
        await device_service.create_device("Tablet", "BrandB")
        third = await device_service.create_device("Laptop", "BrandA")

        result = await device_service.list_devices_by_brand("BrandA")
        assert [device.id for device in result] == [first.id, third.id]

    @pytest.mark.asyncio
    async def test_list_by_brand_is_case_sensitive(self, device_service):
        await device_service.create_device("Phone", "BrandA")
        assert await device_service.list_devices_by_brand("branda") == []

    @pytest.mark.asyncio
    async def test_list_by_state(self, device_service):
        first = await device_service.create_device("Phone", "BrandA")
        second = await device_service.create_device("Tablet", "BrandB")
        await device_service.partial_update_device(second.id, {"state": "INACTIVE"})

        available = await device_service.list_devices_by_state(DeviceState.AVAILABLE)
        assert [device.id for device in available] == [first.id]

    @pytest.mark.asyncio
    async def test_search_combines_filters(self, device_service):
        first = await device_service.create_device("Phone", "BrandA")
        await device_service.create_device("Tablet", "BrandA")
        await device_service.partial_update_device(first.id, {"state": "IN_USE"})

        result = await device_service.search_devices(brand="BrandA", state=DeviceState.IN_USE)
        assert [device.id for device in result] == [first.id]

    @pytest.mark.asyncio
    async def test_get_missing_on_empty_store(self, device_service):
        with pytest.raises(DeviceNotFoundError, match="Device with id 999 was not found"):
            await device_service.get_device("999")
        assert await device_service.list_devices() == []

    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, device_service):
        created = await device_service.create_device("Phone", "BrandA")
        await device_service.delete_device(created.id)
        with pytest.raises(DeviceNotFoundError):
            await device_service.get_device(created.id)

    @pytest.mark.asyncio
    async def test_delete_in_use_keeps_device(self, device_service):
        created = await device_service.create_device("Phone", "BrandA")
        await device_service.partial_update_device(created.id, {"state": "IN_USE"})
        with pytest.raises(DeviceConflictError):
            await device_service.delete_device(created.id)
        assert (await device_service.get_device(created.id)).state == DeviceState.IN_USE

    @pytest.mark.asyncio
    async def test_creation_time_survives_updates(self, device_service):
        created = await device_service.create_device("Phone", "BrandA")
        await device_service.update_device(
            created.id,
            DeviceUpdateRequest(
                name="Phone 2",
                brand="BrandA",
                state=DeviceState.INACTIVE,
                creation_time="2001-01-01T00:00:00Z",
            ),
        )
        with pytest.raises(DeviceConflictError, match="Creation time cannot be updated"):
            await device_service.partial_update_device(created.id, {"creationTime": "2001-01-01T00:00:00Z"})
        stored = await device_service.get_device(created.id)
        assert stored.name == "Phone 2"
        assert stored.creation_time == created.creation_time
