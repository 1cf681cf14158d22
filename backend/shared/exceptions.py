"""
Base exception classes for the DevHub backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status (see api/middleware/errors.py),
so modules never deal with status codes themselves.
"""

from typing import Optional, Any


class DevhubError(Exception):
    """
    Base exception for all DevHub errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the JSON body returned by the API."""
        return {"msg": self.message}


class NotFoundError(DevhubError):
    """Resource not found."""

    pass


class ValidationError(DevhubError):
    """Input validation failed."""

    pass


class AuthenticationError(DevhubError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(DevhubError):
    """Authorization failed (acting user does not own the resource)."""

    pass


class ConflictError(DevhubError):
    """Operation conflicts with the current state of a resource."""

    pass


class InternalError(DevhubError):
    """Unexpected failure inside the service (store, signing, config)."""

    pass


class ExternalServiceError(DevhubError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class ConcurrentUpdateError(ConflictError):
    """Raised when a versioned write keeps losing to concurrent writers."""

    def __init__(self, resource: str, resource_id: str, attempts: int):
        super().__init__(
            f"Could not update {resource} {resource_id}, please retry",
            code="CONCURRENT_UPDATE",
            details={
                "resource": resource,
                "resource_id": resource_id,
                "attempts": attempts,
            },
        )
