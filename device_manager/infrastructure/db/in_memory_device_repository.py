"""Thread-safe in-memory device store."""

# Standard library imports
from dataclasses import replace
from itertools import count
from threading import Lock
from typing import Any, Dict, List, Optional

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.exceptions import DeviceStoreError


class InMemoryDeviceRepository(DeviceRepository):
    """
    Stores devices in an insertion-ordered dict.

    Ids are sequential integers rendered as strings. Every read and write
    hands out copies, so callers never hold a reference to the stored record.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._devices: Dict[str, Device] = {}
        self._ids = count(1)

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        with self._lock:
            device = self._devices.get(device_id)
            return replace(device) if device else None

    async def find_all(self) -> List[Device]:
        with self._lock:
            return [replace(device) for device in self._devices.values()]

    async def find_by_field(self, field: str, value: Any) -> List[Device]:
        with self._lock:
            return [
                replace(device)
                for device in self._devices.values()
                if getattr(device, field, None) == value
            ]

    async def save(self, device: Device) -> Device:
        with self._lock:
            stored = replace(device)
            if not stored.id:
                stored.id = str(next(self._ids))
            elif stored.id not in self._devices:
                raise DeviceStoreError(f"Device {stored.id} no longer exists in the store")
            self._devices[stored.id] = stored
            return replace(stored)

    async def delete(self, device: Device) -> None:
        with self._lock:
            self._devices.pop(device.id, None)
