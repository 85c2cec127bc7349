"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Every timestamp the application persists is a timezone-aware UTC datetime.

Functions:
- utc_now(): Returns the current time as an aware UTC datetime
- ensure_utc(): Normalizes naive/aware datetimes to aware UTC
- mongo_datetime_to_utc(): Marks datetimes read back from MongoDB as UTC
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    BSON dates have millisecond precision, so microseconds are truncated here
    to keep the in-memory value identical to what a round trip returns.
    """
    current = datetime.now(dt_timezone.utc)
    return current.replace(microsecond=(current.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def mongo_datetime_to_utc(mongo_dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert MongoDB datetime object to timezone-aware UTC.

    MongoDB stores all datetimes as UTC, but PyMongo/Motor often return them as naive
    datetime objects representing UTC. This helper makes them explicitly UTC-aware.
    """
    return ensure_utc(mongo_dt)
