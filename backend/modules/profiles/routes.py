"""
Profile API endpoints.

Mounted at /api/profile. Reading profiles and GitHub repositories is
public; everything that changes a profile acts on the caller's own.
"""

from typing import Any

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IProfileService
from .models import Profile, ProfileRequest, ExperienceRequest, EducationRequest

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.get_profile_by_user(user.id)


@router.post("", response_model=Profile)
async def upsert_profile(
    request: ProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Create or update the current user's profile.

    Fields left out of the request keep their stored values.
    """
    return await service.upsert_profile(user.id, request)


@router.get("", response_model=list[Profile])
async def list_profiles(
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    return await service.list_profiles()


@router.get("/user/{user_id}", response_model=Profile)
async def get_profile_by_user(
    user_id: str,
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.get_profile_by_user(user_id)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """
    Delete the current user's posts, profile and account.
    """
    await service.delete_account(user.id)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=Profile)
async def add_experience(
    request: ExperienceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_experience(user.id, request)


@router.delete("/experience/{exp_id}", response_model=Profile)
async def remove_experience(
    exp_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_experience(user.id, exp_id)


@router.put("/education", response_model=Profile)
async def add_education(
    request: EducationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_education(user.id, request)


@router.delete("/education/{edu_id}", response_model=Profile)
async def remove_education(
    edu_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_education(user.id, edu_id)


@router.get("/github/{username}")
async def get_github_repos(
    username: str,
    service: IProfileService = Depends(get_profile_service),
) -> list[dict[str, Any]]:
    """
    Get a GitHub user's repositories for display on their profile.
    """
    return await service.get_github_repos(username)
