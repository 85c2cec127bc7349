"""
Device Manager Application root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device domain (model, lifecycle rules, store contract), application
use cases and the storage backends.
"""

__version__ = "1.0.0"
