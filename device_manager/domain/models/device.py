# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

# Local application imports
from ..exceptions import DeviceValidationError


class DeviceState(str, Enum):
    """Lifecycle state of a device."""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"


def _require_text(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise DeviceValidationError(f"{label} must be a string")
    if len(value.strip()) < 1:
        raise DeviceValidationError(f"{label} cannot be blank")
    return value


def _coerce_state(value: Any) -> DeviceState:
    if isinstance(value, DeviceState):
        return value
    try:
        return DeviceState(value)
    except ValueError:
        allowed = ", ".join(state.value for state in DeviceState)
        raise DeviceValidationError(
            f"Invalid device state '{value}'. Allowed values: {allowed}"
        )


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    Represents one physical device in the inventory. The id is assigned by
    the store on first save and creation_time is stamped once at creation;
    neither is ever changed afterwards.

    Name and brand are stored exactly as given. Blank values are rejected but
    nothing is trimmed, so equality checks compare the raw stored values.
    """
    id: Optional[str]
    name: str
    brand: str
    state: DeviceState = DeviceState.AVAILABLE
    creation_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        _require_text(self.name, "Name")
        _require_text(self.brand, "Brand")
        self.state = _coerce_state(self.state)

    def is_in_use(self) -> bool:
        """Check if device is currently in use."""
        return self.state == DeviceState.IN_USE

    def update_name(self, new_name: Any) -> None:
        """Update device name."""
        self.name = _require_text(new_name, "Name")

    def update_brand(self, new_brand: Any) -> None:
        """Update device brand."""
        self.brand = _require_text(new_brand, "Brand")

    def update_state(self, new_state: Any) -> None:
        """Move the device to another lifecycle state."""
        self.state = _coerce_state(new_state)
