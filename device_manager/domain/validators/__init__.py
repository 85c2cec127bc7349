from .device_validator import violates_immutable_full, violates_immutable_partial

__all__ = ["violates_immutable_full", "violates_immutable_partial"]
