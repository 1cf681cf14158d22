"""
Authentication module interface.

Other modules and the API layer should depend on IAuthService, not the
concrete implementation. This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for credential store operations.

    Implementations must provide all these methods.
    """

    async def register(self, name: str, email: str, password: str) -> str:
        """
        Create an account and return a bearer token for it.

        Raises:
            DuplicateEmailError: If the email already has an account
        """
        ...

    async def authenticate(self, email: str, password: str) -> str:
        """
        Check credentials and return a bearer token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def get_user_by_id(self, user_id: str) -> User:
        """
        Get a user by id (password excluded).

        Raises:
            UserNotFoundError: If no user has this id
        """
        ...

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None."""
        ...

    async def delete_user(self, user_id: str) -> None:
        """Remove the user record (owned posts and profile are removed by the caller)."""
        ...
