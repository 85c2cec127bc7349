from .device import Device, DeviceState

__all__ = ["Device", "DeviceState"]
