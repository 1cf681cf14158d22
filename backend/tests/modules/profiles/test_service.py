"""Tests for the profiles service."""

import pytest
import uuid
from datetime import date, datetime, timezone
from typing import Any, Optional
from unittest.mock import MagicMock, AsyncMock

from modules.profiles.service import ProfileService
from modules.profiles.models import (
    Profile,
    ProfileUser,
    ProfileRequest,
    ExperienceRequest,
    EducationRequest,
)
from modules.profiles.exceptions import ProfileNotFoundError
from shared.exceptions import ConcurrentUpdateError

from tests.conftest import TEST_USER_ID, OTHER_USER_ID


class InMemoryProfileRepository:
    """Profiles table kept in a dict, with the same versioning rules as the real one."""

    def __init__(self):
        self.rows: dict[str, Profile] = {}

    def get_by_user(self, user_id: str) -> Optional[Profile]:
        return self.rows.get(user_id)

    def list_all(self) -> list[Profile]:
        return list(self.rows.values())

    def create(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        if user_id in self.rows:
            return None
        self.rows[user_id] = Profile(
            id=str(uuid.uuid4()),
            user=ProfileUser(id=user_id, name="Ada"),
            date=datetime.now(timezone.utc),
            **data,
        )
        return self.rows[user_id]

    def update(self, profile: Profile, data: dict[str, Any]) -> Optional[Profile]:
        current = self.rows.get(profile.user.id)
        if current is None or current.version != profile.version:
            return None
        merged = {**current.model_dump(by_alias=True), **data, "version": current.version + 1}
        self.rows[profile.user.id] = Profile(**merged)
        return self.rows[profile.user.id]

    def delete_by_user(self, user_id: str) -> None:
        self.rows.pop(user_id, None)


def experience_request(title: str = "Engineer") -> ExperienceRequest:
    return ExperienceRequest.model_validate(
        {"title": title, "company": "Acme", "from": "2020-01-01", "current": True}
    )


def education_request(school: str = "MIT") -> EducationRequest:
    return EducationRequest.model_validate(
        {"school": school, "degree": "BSc", "fieldofstudy": "CS", "from": "2015-09-01", "to": "2019-06-01"}
    )


class TestProfileService:
    @pytest.fixture
    def repository(self):
        return InMemoryProfileRepository()

    @pytest.fixture
    def github(self):
        github = MagicMock()
        github.get_repos = AsyncMock(return_value=[{"name": "repo"}])
        return github

    @pytest.fixture
    def auth(self):
        auth = MagicMock()
        auth.delete_user = AsyncMock()
        return auth

    @pytest.fixture
    def posts(self):
        posts = MagicMock()
        posts.delete_posts_by_user = AsyncMock()
        return posts

    @pytest.fixture
    def service(self, repository, github, auth, posts):
        return ProfileService(repository=repository, github=github, auth=auth, posts=posts)

    @pytest.mark.asyncio
    async def test_get_missing_profile(self, service):
        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_profile_by_user(TEST_USER_ID)
        assert exc_info.value.to_dict() == {"msg": "There is no profile for this user"}

    @pytest.mark.asyncio
    async def test_upsert_creates_profile(self, service):
        profile = await service.upsert_profile(
            TEST_USER_ID,
            ProfileRequest(status="Developer", skills="python, go", twitter="https://twitter.com/ada"),
        )

        assert profile.status == "Developer"
        assert profile.skills == ["python", "go"]
        assert profile.social == {"twitter": "https://twitter.com/ada"}

    @pytest.mark.asyncio
    async def test_upsert_twice_merges_into_one_profile(self, service, repository):
        """A second upsert should update the same profile and keep omitted fields."""
        first = await service.upsert_profile(
            TEST_USER_ID,
            ProfileRequest(
                status="Developer",
                skills="python",
                company="Acme",
                twitter="https://twitter.com/ada",
            ),
        )
        second = await service.upsert_profile(
            TEST_USER_ID,
            ProfileRequest(status="Senior Developer", skills="python, rust", youtube="https://youtube.com/ada"),
        )

        assert len(repository.list_all()) == 1
        assert second.id == first.id
        assert second.status == "Senior Developer"
        assert second.skills == ["python", "rust"]
        assert second.company == "Acme"
        assert second.social == {
            "twitter": "https://twitter.com/ada",
            "youtube": "https://youtube.com/ada",
        }

    @pytest.mark.asyncio
    async def test_profiles_are_per_user(self, service):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))
        await service.upsert_profile(OTHER_USER_ID, ProfileRequest(status="Ops", skills="k8s"))
        assert len(await service.list_profiles()) == 2

    @pytest.mark.asyncio
    async def test_add_experience_prepends(self, service):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))

        await service.add_experience(TEST_USER_ID, experience_request("Junior"))
        profile = await service.add_experience(TEST_USER_ID, experience_request("Senior"))

        assert [entry.title for entry in profile.experience] == ["Senior", "Junior"]
        assert profile.experience[0].from_ == date(2020, 1, 1)
        assert profile.experience[0].id != profile.experience[1].id

    @pytest.mark.asyncio
    async def test_add_experience_without_profile(self, service):
        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(TEST_USER_ID, experience_request())

    @pytest.mark.asyncio
    async def test_remove_experience(self, service):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))
        profile = await service.add_experience(TEST_USER_ID, experience_request())

        profile = await service.remove_experience(TEST_USER_ID, profile.experience[0].id)

        assert profile.experience == []

    @pytest.mark.asyncio
    async def test_remove_unknown_experience_is_noop(self, service):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))
        before = await service.add_experience(TEST_USER_ID, experience_request())

        after = await service.remove_experience(TEST_USER_ID, "no-such-entry")

        assert after.experience == before.experience
        assert after.version == before.version

    @pytest.mark.asyncio
    async def test_add_and_remove_education(self, service):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))

        profile = await service.add_education(TEST_USER_ID, education_request())
        assert profile.education[0].school == "MIT"
        assert profile.education[0].to == date(2019, 6, 1)

        profile = await service.remove_education(TEST_USER_ID, profile.education[0].id)
        assert profile.education == []

    @pytest.mark.asyncio
    async def test_list_mutation_gives_up_after_conflicts(self, github):
        repository = MagicMock()
        repository.get_by_user.return_value = Profile(
            id="p1",
            user=ProfileUser(id=TEST_USER_ID),
            date=datetime.now(timezone.utc),
        )
        repository.update.return_value = None
        service = ProfileService(repository=repository, github=github, max_attempts=2)

        with pytest.raises(ConcurrentUpdateError):
            await service.add_experience(TEST_USER_ID, experience_request())

        assert repository.update.call_count == 2

    @pytest.mark.asyncio
    async def test_delete_account_cascades(self, service, repository, auth, posts):
        await service.upsert_profile(TEST_USER_ID, ProfileRequest(status="Dev", skills="go"))

        await service.delete_account(TEST_USER_ID)

        posts.delete_posts_by_user.assert_awaited_once_with(TEST_USER_ID)
        auth.delete_user.assert_awaited_once_with(TEST_USER_ID)
        assert repository.get_by_user(TEST_USER_ID) is None

    @pytest.mark.asyncio
    async def test_get_github_repos(self, service, github):
        assert await service.get_github_repos("ada") == [{"name": "repo"}]
        github.get_repos.assert_awaited_once_with("ada")
