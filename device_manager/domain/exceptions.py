"""
Device domain exceptions.

Every error raised by the device use cases carries an ErrorKind. The API
layer maps the kind to an HTTP status through a fixed lookup table, so new
exception classes only need to pick one of the existing kinds.
"""

# Standard library imports
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Abstract error categories surfaced by the device service."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE = "store"


class DeviceError(Exception):
    """Base class for device related domain errors."""

    kind: ErrorKind = ErrorKind.STORE

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DeviceValidationError(DeviceError, ValueError):
    """Raised when a device field is missing, blank or has an invalid value."""

    kind = ErrorKind.VALIDATION


class DeviceNotFoundError(DeviceError):
    """Raised when the requested device could not be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, device_id: str) -> None:
        super().__init__(
            f"Device with id {device_id} was not found",
            details={"device_id": device_id},
        )
        self.device_id = device_id


class DeviceConflictError(DeviceError):
    """Raised when a mutation is not allowed for the device's current state."""

    kind = ErrorKind.CONFLICT


class DeviceStoreError(DeviceError):
    """Raised when the underlying device store fails."""

    kind = ErrorKind.STORE
