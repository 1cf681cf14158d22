"""
Profiles module.

Developer profiles: partial-field upserts, skills and social link
normalization, experience and education entries, GitHub repositories.

Public API:
- IProfileService: Interface for profile operations
- Profile and request models
- Profile exceptions: ProfileNotFoundError, GithubProfileNotFoundError, etc.
"""

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileUser,
    ProfileRequest,
    Experience,
    ExperienceRequest,
    Education,
    EducationRequest,
)
from .exceptions import (
    ProfileNotFoundError,
    GithubProfileNotFoundError,
    GithubUnavailableError,
)

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Profile",
    "ProfileUser",
    "ProfileRequest",
    "Experience",
    "ExperienceRequest",
    "Education",
    "EducationRequest",
    # Exceptions
    "ProfileNotFoundError",
    "GithubProfileNotFoundError",
    "GithubUnavailableError",
]
