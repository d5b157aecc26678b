"""
Passhub API package.

Provides the FastAPI application for the Passhub event pass service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
