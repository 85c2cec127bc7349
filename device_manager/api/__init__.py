"""
API layer for the Device Manager.

Exposes the device HTTP endpoints under /api/v1/devices.
"""
