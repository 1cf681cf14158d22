"""
Shared infrastructure for DevHub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with versioned writes
- concurrency: Retry loop for versioned writes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, check_connection, reset_client_cache
from .exceptions import (
    DevhubError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
    ExternalServiceError,
    ConcurrentUpdateError,
)
from .models import AuthenticatedUser, MessageResponse

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "check_connection",
    "reset_client_cache",
    "DevhubError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "InternalError",
    "ExternalServiceError",
    "ConcurrentUpdateError",
    "AuthenticatedUser",
    "MessageResponse",
]
