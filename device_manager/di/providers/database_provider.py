# Standard library imports
import logging
from typing import TYPE_CHECKING

# Local application imports
from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_device_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database collections in the container.
        This is the ONLY place where database connections are registered.
        Nothing is opened when the in-memory device store is configured.
        """
        settings = get_settings()
        container.register_singleton("device_store_backend", settings.device_store_backend)
        
        if settings.device_store_backend != "mongo":
            return
        
        container.register_singleton("device_collection", get_device_collection())
        logger.info(
            f"Registered MongoDB collection '{settings.devices_collection}' "
            f"in database '{settings.mongo_database_name}'"
        )
