# Standard library imports
from typing import TYPE_CHECKING

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

SUPPORTED_BACKENDS = ("mongo", "memory")


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the device repository implementation for the configured backend.
        """
        backend = container.get("device_store_backend")
        
        if backend == "memory":
            container.register_singleton(DeviceRepository, InMemoryDeviceRepository())
        elif backend == "mongo":
            container.register_singleton(
                DeviceRepository,
                MongoDeviceRepository(device_collection=container.get("device_collection"))
            )
        else:
            raise ValueError(
                f"Unsupported DEVICE_STORE_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}"
            )
