"""
DevHub API package.

Provides the FastAPI application for the DevHub service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
