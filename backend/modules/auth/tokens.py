"""
Token service.

Issues and verifies the stateless bearer tokens handed out at login and
registration. Tokens are HS256 JWTs carrying {"user": {"id": ...}} and an
expiry; nothing is stored server-side, so expiry is the only way a token
stops working.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import jwt

from shared.config import Settings

from .exceptions import InvalidTokenError, TokenSigningError

DEFAULT_EXPIRES_IN = 3600  # seconds


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Signs and verifies user tokens with a process-wide secret.

    The clock is injectable so expiry can be exercised in tests without
    sleeping.
    """

    def __init__(
        self,
        secret: str,
        expires_in: int = DEFAULT_EXPIRES_IN,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm
        self._clock = clock or _utcnow

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            expires_in=settings.jwt_expires_in,
            algorithm=settings.jwt_algorithm,
        )

    @property
    def expires_in(self) -> int:
        return self._expires_in

    def issue(self, user_id: str) -> str:
        """
        Create a signed token for user_id.

        Raises:
            TokenSigningError: If no secret is configured or signing fails.
        """
        if not self._secret:
            raise TokenSigningError("JWT secret not configured")

        now = self._clock()
        payload = {
            "user": {"id": user_id},
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._expires_in)).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenSigningError(str(e))

    def verify(self, token: str) -> str:
        """
        Validate a token and return the user id it carries.

        Expiry is checked against the injected clock. Expired, malformed and
        badly signed tokens all raise the same error.

        Raises:
            InvalidTokenError: If the token cannot be trusted.
        """
        if not self._secret:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "require": ["exp"]},
            )
        except jwt.InvalidTokenError:
            raise InvalidTokenError()

        if payload["exp"] <= int(self._clock().timestamp()):
            raise InvalidTokenError()

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            raise InvalidTokenError()
        return str(user["id"])
