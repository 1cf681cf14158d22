"""
Profile field normalization.

Turns a ProfileRequest into the columns to write. Empty or missing inputs
are dropped so an update never blanks out a value the user left alone.
"""

from typing import Any, Optional

from .models import ProfileRequest

PROFILE_FIELDS = ("company", "website", "location", "status", "bio", "githubusername")
SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def parse_skills(skills: str) -> list[str]:
    """Split a comma-separated skills string into a trimmed, ordered list."""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_profile_fields(request: ProfileRequest) -> tuple[dict[str, Any], dict[str, str]]:
    """
    Collect the present profile fields and social links.

    Returns:
        (fields, social): column values to write, and the social links
        that were supplied.
    """
    fields: dict[str, Any] = {
        name: getattr(request, name).strip()
        for name in PROFILE_FIELDS
        if _present(getattr(request, name))
    }
    if _present(request.skills):
        fields["skills"] = parse_skills(request.skills)

    social = {
        platform: getattr(request, platform).strip()
        for platform in SOCIAL_PLATFORMS
        if _present(getattr(request, platform))
    }
    return fields, social


def merge_social(existing: dict[str, str], updates: dict[str, str]) -> dict[str, str]:
    """Overlay supplied social links on the stored ones."""
    return {**existing, **updates}
