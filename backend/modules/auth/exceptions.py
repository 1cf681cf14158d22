"""
Authentication module exceptions.

These exceptions are raised by the auth module and translated into
HTTP responses by the API error handlers.
"""

from typing import Any

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class NoTokenError(AuthenticationError):
    """Raised when a private route is called without a token."""

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message, code="NO_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, badly signed or expired."""

    def __init__(self, message: str = "Token is not valid."):
        super().__init__(message, code="INVALID_TOKEN")


class TokenSigningError(InternalError):
    """Raised when a token cannot be signed (missing secret, bad key)."""

    def __init__(self, reason: str):
        super().__init__(
            "Token could not be issued",
            code="TOKEN_SIGNING_FAILED",
            details={"reason": reason},
        )


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists.",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [{"msg": self.message}]}


class InvalidCredentialsError(ValidationError):
    """Raised when login email or password does not match."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [{"msg": self.message}]}


class UserNotFoundError(NotFoundError):
    """Raised when a user id has no record."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
