"""
Profiles module exceptions.
"""

from shared.exceptions import ExternalServiceError, NotFoundError


class ProfileNotFoundError(NotFoundError):
    """Raised when a user has no profile yet."""

    def __init__(self, user_id: str):
        super().__init__(
            "There is no profile for this user",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class GithubProfileNotFoundError(ExternalServiceError):
    """Raised when GitHub does not return repositories for a username."""

    def __init__(self, username: str, status_code: int):
        super().__init__(
            "No Github profile found",
            service="github",
            code="GITHUB_PROFILE_NOT_FOUND",
            details={"username": username, "status_code": status_code},
        )


class GithubUnavailableError(ExternalServiceError):
    """Raised when the GitHub API cannot be reached."""

    def __init__(self, username: str, reason: str):
        super().__init__(
            "Github is unavailable",
            service="github",
            code="GITHUB_UNAVAILABLE",
            details={"username": username, "error": reason},
        )
