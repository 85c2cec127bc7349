"""
Immutability rules for devices that are in use.

Both predicates are pure. Callers only consult them when the stored device
is IN_USE; for any other state name and brand may change freely.
"""
# Standard library imports
from typing import Any, Mapping

# Local application imports
from ..constants import DeviceFields
from ..models.device import Device


def violates_immutable_full(existing: Device, proposed: Device) -> bool:
    """True if a full replacement would change name or brand."""
    return existing.name != proposed.name or existing.brand != proposed.brand


def violates_immutable_partial(existing: Device, field_changes: Mapping[str, Any]) -> bool:
    """True if a partial field map changes name or brand to a different value."""
    name_changed = (
        DeviceFields.NAME in field_changes
        and field_changes[DeviceFields.NAME] != existing.name
    )
    brand_changed = (
        DeviceFields.BRAND in field_changes
        and field_changes[DeviceFields.BRAND] != existing.brand
    )
    return name_changed or brand_changed
