"""Application layer: DTOs, device use cases and the device service."""
