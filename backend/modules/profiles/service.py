"""
Profiles service implementation.

Upserts profiles from partial input, maintains the experience and
education lists, deletes accounts and proxies GitHub repositories.
"""

import logging
import uuid
from typing import Any, Callable

from shared.concurrency import run_versioned

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileRequest,
    Experience,
    ExperienceRequest,
    Education,
    EducationRequest,
)
from .fields import build_profile_fields, merge_social
from .repository import ProfileRepository
from .github import GithubClient
from .exceptions import ProfileNotFoundError

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """
    Profile service with Supabase backend.

    Implements IProfileService protocol with real database operations.
    """

    def __init__(
        self,
        repository: ProfileRepository,
        github: GithubClient,
        auth: Any = None,   # IAuthService - injected
        posts: Any = None,  # IPostService - injected
        max_attempts: int = 3,
    ):
        self._profiles = repository
        self._github = github
        self._auth = auth
        self._posts = posts
        self._max_attempts = max_attempts

    async def get_profile_by_user(self, user_id: str) -> Profile:
        profile = self._profiles.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def list_profiles(self) -> list[Profile]:
        return self._profiles.list_all()

    async def upsert_profile(self, user_id: str, request: ProfileRequest) -> Profile:
        """
        Create the user's profile, or merge the supplied fields into it.

        Fields absent from the request keep their stored values; social
        links are merged per platform.
        """
        fields, social = build_profile_fields(request)

        def attempt():
            existing = self._profiles.get_by_user(user_id)
            if existing is None:
                # None here means another request created it first; retry as update
                return self._profiles.create(user_id, {**fields, "social": social})
            data = {**fields, "social": merge_social(existing.social, social)}
            return self._profiles.update(existing, data)

        return run_versioned(attempt, "profile", user_id, self._max_attempts)

    async def add_experience(self, user_id: str, request: ExperienceRequest) -> Profile:
        entry = Experience(id=str(uuid.uuid4()), **request.model_dump())
        return self._mutate(user_id, "experience", lambda p: [entry, *p.experience])

    async def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        """Remove an experience entry; unknown ids leave the profile unchanged."""
        return self._remove_entry(user_id, "experience", experience_id)

    async def add_education(self, user_id: str, request: EducationRequest) -> Profile:
        entry = Education(id=str(uuid.uuid4()), **request.model_dump())
        return self._mutate(user_id, "education", lambda p: [entry, *p.education])

    async def remove_education(self, user_id: str, education_id: str) -> Profile:
        """Remove an education entry; unknown ids leave the profile unchanged."""
        return self._remove_entry(user_id, "education", education_id)

    async def delete_account(self, user_id: str) -> None:
        """Delete the user's posts, profile and user record, in that order."""
        if self._posts is not None:
            await self._posts.delete_posts_by_user(user_id)
        self._profiles.delete_by_user(user_id)
        if self._auth is not None:
            await self._auth.delete_user(user_id)
        logger.info(f"Deleted account {user_id}")

    async def get_github_repos(self, username: str) -> list[dict[str, Any]]:
        return await self._github.get_repos(username)

    def _remove_entry(self, user_id: str, field: str, entry_id: str) -> Profile:
        def attempt():
            profile = self._profiles.get_by_user(user_id)
            if profile is None:
                raise ProfileNotFoundError(user_id)
            entries = getattr(profile, field)
            remaining = [entry for entry in entries if entry.id != entry_id]
            if len(remaining) == len(entries):
                return profile
            return self._profiles.update(profile, {field: self._dump(remaining)})

        return run_versioned(attempt, "profile", user_id, self._max_attempts)

    def _mutate(
        self,
        user_id: str,
        field: str,
        mutate: Callable[[Profile], list],
    ) -> Profile:
        """Read-mutate-write one of the profile's lists under optimistic concurrency."""

        def attempt():
            profile = self._profiles.get_by_user(user_id)
            if profile is None:
                raise ProfileNotFoundError(user_id)
            return self._profiles.update(profile, {field: self._dump(mutate(profile))})

        return run_versioned(attempt, "profile", user_id, self._max_attempts)

    @staticmethod
    def _dump(entries: list) -> list[dict[str, Any]]:
        return [entry.model_dump(mode="json", by_alias=True) for entry in entries]
