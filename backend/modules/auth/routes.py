"""
Registration and login endpoints.

Mounted at /api/users (registration) and /api/auth (login, current user).
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import RegisterRequest, LoginRequest, TokenResponse, User

users_router = APIRouter()
auth_router = APIRouter()


@users_router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Register a user and return a token for the new account.
    """
    token = await service.register(request.name, request.email, request.password)
    return TokenResponse(token=token)


@auth_router.post("", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange email and password for a token.
    """
    token = await service.authenticate(request.email, request.password)
    return TokenResponse(token=token)


@auth_router.get("", response_model=User)
async def get_authenticated_user(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Get the user the token belongs to (password excluded).
    """
    return await service.get_user_by_id(user.id)
