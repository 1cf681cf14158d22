"""
Authentication module.

Handles registration, login, token issuance/verification and user lookup.

Public API:
- IAuthService: Interface for credential store operations
- TokenService: Issues and verifies bearer tokens
- User: User record without the password hash
- Auth exceptions: NoTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import User, RegisterRequest, LoginRequest, TokenResponse
from .tokens import TokenService
from .exceptions import (
    NoTokenError,
    InvalidTokenError,
    TokenSigningError,
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    "TokenService",
    # Models
    "User",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    # Exceptions
    "NoTokenError",
    "InvalidTokenError",
    "TokenSigningError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "UserNotFoundError",
]
