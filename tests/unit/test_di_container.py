"""
Unit tests for the dependency injection container and its providers.
"""
from unittest.mock import MagicMock, patch

import pytest

from device_manager.application.services.device_service import DeviceService
from device_manager.di.base_container import BaseContainer
from device_manager.di.container import DIContainer
from device_manager.domain.repositories.device_repository import DeviceRepository
from device_manager.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository
from device_manager.infrastructure.db.mongo_device_repository import MongoDeviceRepository


class TestBaseContainer:
    """Tests for BaseContainer registrations"""

    def test_singleton_by_string_key(self):
        container = BaseContainer()
        container.register_singleton("answer", 42)
        assert container.get("answer") == 42

    def test_singleton_by_type(self):
        container = BaseContainer()
        repository = InMemoryDeviceRepository()
        container.register_singleton(DeviceRepository, repository)
        assert container.get(DeviceRepository) is repository

    def test_missing_registration_raises(self):
        with pytest.raises(ValueError, match="No registration found"):
            BaseContainer().get("missing")


class TestDIContainer:
    """Tests for provider composition"""

    def test_memory_backend(self, mock_settings):
        mock_settings.device_store_backend = "memory"
        container = DIContainer()
        assert "device_collection" not in container.instances
        assert isinstance(container.get(DeviceRepository), InMemoryDeviceRepository)
        assert isinstance(container.get(DeviceService), DeviceService)
        assert container.get(DeviceService) is container.get(DeviceService)

    def test_mongo_backend(self, mock_settings):
        mock_settings.device_store_backend = "mongo"
        collection = MagicMock()
        with patch(
            "device_manager.di.providers.database_provider.get_device_collection", return_value=collection
        ):
            container = DIContainer()
        repository = container.get(DeviceRepository)
        assert isinstance(repository, MongoDeviceRepository)
        assert repository.device_collection is collection

    def test_unknown_backend_raises(self, mock_settings):
        mock_settings.device_store_backend = "sqlite"
        with pytest.raises(ValueError, match="Unsupported DEVICE_STORE_BACKEND 'sqlite'"):
            DIContainer()
