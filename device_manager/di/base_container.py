# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

T = TypeVar("T")

RegistrationKey = Union[Type[Any], str]


class BaseContainer:
    """
    Registry of shared instances.

    Providers register each dependency once, keyed either by the interface
    type (``DeviceRepository``) or by a plain string for configuration values
    and driver handles (``"device_collection"``).
    """
    
    def __init__(self) -> None:
        self.instances: Dict[RegistrationKey, Any] = {}
    
    def register_singleton(self, key: RegistrationKey, instance: Any) -> None:
        """Register the instance returned for key"""
        self.instances[key] = instance
    
    def get(self, key: Union[Type[T], str]) -> T:
        """Return the instance registered for key"""
        try:
            return self.instances[key]
        except KeyError:
            raise ValueError(f"No registration found for {key}") from None
