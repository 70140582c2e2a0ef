"""
Life Lessons API package.

Provides the FastAPI application for the lessons marketplace.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
