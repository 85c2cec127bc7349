"""Constants for domain model field names"""

from .device_fields import DeviceFields

__all__ = [
    "DeviceFields",
]
