from .create_device import CreateDeviceUseCase
from .get_device import GetDeviceUseCase
from .list_devices import ListDevicesUseCase
from .update_device import UpdateDeviceUseCase
from .partial_update_device import PartialUpdateDeviceUseCase
from .delete_device import DeleteDeviceUseCase

__all__ = [
    "CreateDeviceUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "UpdateDeviceUseCase",
    "PartialUpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
