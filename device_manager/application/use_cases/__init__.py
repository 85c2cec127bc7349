from .device import (
    CreateDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
    PartialUpdateDeviceUseCase,
    DeleteDeviceUseCase,
)

__all__ = [
    "CreateDeviceUseCase",
    "GetDeviceUseCase",
    "ListDevicesUseCase",
    "UpdateDeviceUseCase",
    "PartialUpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
