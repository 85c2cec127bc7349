"""
Shared pytest fixtures for device manager tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from device_manager.application.services.device_service import DeviceService
from device_manager.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_manager",
        "DEVICES_COLLECTION": "devices",
        "DEVICE_STORE_BACKEND": "memory",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.devices_collection = "devices"
    mock.device_store_backend = "memory"
    mock.log_level = "INFO"
    mock.cors_allowed_origins = ["http://localhost:5173"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("device_manager.core.config.get_settings", return_value=mock), patch(
        "device_manager.di.providers.database_provider.get_settings", return_value=mock
    ), patch("device_manager.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def memory_repository():
    """Empty in-memory device store."""
    return InMemoryDeviceRepository()


@pytest.fixture
def device_service(memory_repository):
    """DeviceService wired to an empty in-memory store."""
    return DeviceService(memory_repository)
