"""
Shared infrastructure for the Life Lessons backend.

This package contains cross-cutting concerns used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, decode_service_credential
from .database import create_store_client, ping_store
from .exceptions import (
    LessonsError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    InternalError,
)
from .models import ApiModel, AuthenticatedUser, Email

__all__ = [
    "Settings",
    "get_settings",
    "decode_service_credential",
    "create_store_client",
    "ping_store",
    "LessonsError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "InternalError",
    "ApiModel",
    "AuthenticatedUser",
    "Email",
]
