from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .device_provider import DeviceProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "DeviceProvider",
]
