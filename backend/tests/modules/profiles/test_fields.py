"""Tests for profile field normalization."""

from modules.profiles.fields import parse_skills, build_profile_fields, merge_social
from modules.profiles.models import ProfileRequest


class TestParseSkills:
    def test_trims_and_keeps_order(self):
        assert parse_skills(" python, go ,rust") == ["python", "go", "rust"]

    def test_drops_empty_entries(self):
        assert parse_skills("python,, ,go,") == ["python", "go"]


class TestBuildProfileFields:
    def test_only_present_fields(self):
        request = ProfileRequest(status="Developer", skills="python, sql", company="  ", bio="Hi")

        fields, social = build_profile_fields(request)

        assert fields == {"status": "Developer", "bio": "Hi", "skills": ["python", "sql"]}
        assert social == {}

    def test_social_links(self):
        request = ProfileRequest(
            status="Developer",
            skills="python",
            twitter=" https://twitter.com/ada ",
            youtube="",
        )

        _, social = build_profile_fields(request)

        assert social == {"twitter": "https://twitter.com/ada"}


class TestMergeSocial:
    def test_overlays_per_platform(self):
        merged = merge_social(
            {"twitter": "old", "youtube": "yt"},
            {"twitter": "new", "linkedin": "li"},
        )
        assert merged == {"twitter": "new", "youtube": "yt", "linkedin": "li"}
