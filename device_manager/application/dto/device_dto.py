# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, ConfigDict

# Local application imports
from ...domain.models.device import Device, DeviceState


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    name: str
    brand: str


class DeviceUpdateRequest(BaseModel):
    """
    DTO for a full device replacement.

    id and creation_time are accepted so clients can send back a device they
    fetched, but both are always overwritten with the stored values.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: str
    brand: str
    state: DeviceState
    creation_time: Optional[datetime] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: Optional[datetime] = None


def to_device_response(device: Device) -> DeviceResponse:
    """Build the API representation of a stored device."""
    return DeviceResponse(
        id=device.id or "",
        name=device.name,
        brand=device.brand,
        state=device.state,
        creation_time=device.creation_time,
    )
