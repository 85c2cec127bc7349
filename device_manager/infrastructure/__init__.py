"""Infrastructure layer: persistence adapters for the device store."""
