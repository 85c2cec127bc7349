from .device_dto import (
    DeviceCreateRequest,
    DeviceUpdateRequest,
    DeviceResponse,
    to_device_response,
)

__all__ = [
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DeviceResponse",
    "to_device_response",
]
