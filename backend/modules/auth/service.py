"""
Authentication service implementation.

The credential store: registration, login and user lookup. Tokens come
from TokenService; password hashing from passwords.py.
"""

import logging
from typing import Optional

from .interfaces import IAuthService
from .models import User
from .repository import UserRepository
from .tokens import TokenService
from .passwords import hash_password, verify_password, gravatar_url
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the credential store.

    Users live in the Supabase users table; tokens are stateless JWTs.
    """

    def __init__(
        self,
        repository: UserRepository,
        tokens: TokenService,
        bcrypt_rounds: int = 10,
    ):
        self._users = repository
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds

    async def register(self, name: str, email: str, password: str) -> str:
        """Create the account, then issue a token for it."""
        if self._users.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        user = self._users.create(
            name=name,
            email=email,
            password_hash=hash_password(password, self._bcrypt_rounds),
            avatar=gravatar_url(email),
        )
        logger.info(f"Registered user {user.id}")
        return self._tokens.issue(user.id)

    async def authenticate(self, email: str, password: str) -> str:
        """
        Verify email and password, then issue a token.

        A password mismatch stops here; no token is ever issued for it.
        """
        record = self._users.get_record_by_email(email)
        if record is None:
            raise InvalidCredentialsError()

        if not verify_password(password, record.password):
            raise InvalidCredentialsError()

        return self._tokens.issue(record.id)

    async def get_user_by_id(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self._users.get_by_email(email)

    async def delete_user(self, user_id: str) -> None:
        """Remove the user record. Callers clean up owned data first."""
        self._users.delete(user_id)
        logger.info(f"Deleted user {user_id}")
