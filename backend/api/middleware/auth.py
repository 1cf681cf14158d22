"""
Token authentication gate.

Reads the x-auth-token header, verifies it with the token service and
exposes the resolved user to private routes.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader

from modules.auth.exceptions import NoTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service

TOKEN_HEADER = "x-auth-token"

# Header extractor; a missing header is reported by the gate, not FastAPI
token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def authenticate_token(token: Optional[str], tokens: TokenService) -> AuthenticatedUser:
    """
    Decide whether a request carrying token may proceed.

    Depends only on the header value and the token service (its key and
    clock).

    Args:
        token: Raw header value, or None if the header was absent

    Returns:
        AuthenticatedUser for the id carried by the token

    Raises:
        NoTokenError: If the header is missing or empty
        InvalidTokenError: If the token is malformed, badly signed or expired
    """
    if not token:
        raise NoTokenError()
    return AuthenticatedUser(id=tokens.verify(token))


async def get_current_user(
    token: Optional[str] = Depends(token_header),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return authenticate_token(token, tokens)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)
