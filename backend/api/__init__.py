"""
Grand Line Guide API package.

Provides the FastAPI application for the auth and country guide service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
