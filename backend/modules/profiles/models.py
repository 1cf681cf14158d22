"""
Profiles module data models.

A profile belongs to exactly one user. Experience and education entries
are embedded, most recent first. Date ranges use the JSON keys "from" and
"to"; "from" is a Python keyword, so the field is declared as from_ with
an alias.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_text(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value.strip()


class ExperienceRequest(BaseModel):
    """Request body for PUT /api/profile/experience."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _require_text(value, "Title is required")

    @field_validator("company")
    @classmethod
    def company_required(cls, value: str) -> str:
        return _require_text(value, "Company is required")


class Experience(ExperienceRequest):
    """A stored experience entry."""

    id: str = Field(..., description="Experience entry ID")


class EducationRequest(BaseModel):
    """Request body for PUT /api/profile/education."""

    model_config = ConfigDict(populate_by_name=True)

    school: str
    degree: str
    fieldofstudy: str
    from_: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("school")
    @classmethod
    def school_required(cls, value: str) -> str:
        return _require_text(value, "School is required")

    @field_validator("degree")
    @classmethod
    def degree_required(cls, value: str) -> str:
        return _require_text(value, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def field_of_study_required(cls, value: str) -> str:
        return _require_text(value, "Field of study is required")


class Education(EducationRequest):
    """A stored education entry."""

    id: str = Field(..., description="Education entry ID")


class ProfileUser(BaseModel):
    """The owning user's public identity, joined on read."""

    id: str
    name: Optional[str] = None
    avatar: Optional[str] = None


class Profile(BaseModel):
    """A developer profile."""

    id: str = Field(..., description="Profile ID")
    user: ProfileUser = Field(..., description="Owning user")
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: dict[str, str] = Field(default_factory=dict)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    date: datetime = Field(..., description="Creation time")
    version: int = Field(default=0, exclude=True, description="Optimistic concurrency version")


class ProfileRequest(BaseModel):
    """
    Request body for POST /api/profile.

    Only status and skills are required. Skills arrive as one
    comma-separated string.
    """

    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    skills: str
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_required(cls, value: str) -> str:
        return _require_text(value, "Status is required")

    @field_validator("skills")
    @classmethod
    def skills_required(cls, value: str) -> str:
        return _require_text(value, "Skills are required")
