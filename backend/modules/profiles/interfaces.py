"""
Profiles module interface.

The API layer depends on IProfileService for all profile operations.
"""

from typing import Any, Protocol, runtime_checkable

from .models import Profile, ProfileRequest, ExperienceRequest, EducationRequest


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations.

    All methods that take user_id act on that user's own profile.
    """

    async def get_profile_by_user(self, user_id: str) -> Profile:
        """
        Get a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def list_profiles(self) -> list[Profile]:
        """All profiles."""
        ...

    async def upsert_profile(self, user_id: str, request: ProfileRequest) -> Profile:
        """
        Create the profile, or merge present fields into the existing one.

        Returns:
            The single profile for user_id after the write
        """
        ...

    async def add_experience(self, user_id: str, request: ExperienceRequest) -> Profile:
        """
        Prepend an experience entry.

        Raises:
            ProfileNotFoundError: If the user has no profile yet
        """
        ...

    async def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        """Remove an experience entry by id (no-op if absent)."""
        ...

    async def add_education(self, user_id: str, request: EducationRequest) -> Profile:
        """
        Prepend an education entry.

        Raises:
            ProfileNotFoundError: If the user has no profile yet
        """
        ...

    async def remove_education(self, user_id: str, education_id: str) -> Profile:
        """Remove an education entry by id (no-op if absent)."""
        ...

    async def delete_account(self, user_id: str) -> None:
        """Delete the user's posts, profile and account."""
        ...

    async def get_github_repos(self, username: str) -> list[dict[str, Any]]:
        """
        Get a GitHub user's repositories.

        Raises:
            GithubProfileNotFoundError: If GitHub has no such user
            GithubUnavailableError: If GitHub cannot be reached
        """
        ...
