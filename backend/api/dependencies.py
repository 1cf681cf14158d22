"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Settings are read once here and handed to each service
through its constructor.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.auth.repository import UserRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository
    from modules.profiles.github import GithubClient


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._token_service: "TokenService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._post_repository: "PostRepository | None" = None
        self._post_service: "IPostService | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._github_client: "GithubClient | None" = None
        self._profile_service: "IProfileService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService.from_settings(self._settings)
        return self._token_service

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                repository=self.user_repository,
                tokens=self.tokens,
                bcrypt_rounds=self._settings.bcrypt_rounds,
            )
        return self._auth_service

    @property
    def post_repository(self) -> "PostRepository":
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            from shared.database import get_supabase_client
            self._post_repository = PostRepository(get_supabase_client())
        return self._post_repository

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(
                repository=self.post_repository,
                auth=self.auth,
                max_attempts=self._settings.mutation_max_attempts,
            )
        return self._post_service

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            from shared.database import get_supabase_client
            self._profile_repository = ProfileRepository(get_supabase_client())
        return self._profile_repository

    @property
    def github(self) -> "GithubClient":
        if self._github_client is None:
            from modules.profiles.github import GithubClient
            self._github_client = GithubClient.from_settings(self._settings)
        return self._github_client

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                repository=self.profile_repository,
                github=self.github,
                auth=self.auth,
                posts=self.posts,
                max_attempts=self._settings.mutation_max_attempts,
            )
        return self._profile_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_service = None
        self._user_repository = None
        self._auth_service = None
        self._post_repository = None
        self._post_service = None
        self._profile_repository = None
        self._github_client = None
        self._profile_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer(get_settings())
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles
