"""Utility modules for the device manager application."""

from .datetime_utils import utc_now, ensure_utc, mongo_datetime_to_utc

__all__ = [
    "utc_now",
    "ensure_utc",
    "mongo_datetime_to_utc",
]
