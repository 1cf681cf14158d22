"""
GitHub client for the repositories shown on a profile.
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import Settings

from .exceptions import GithubProfileNotFoundError, GithubUnavailableError

logger = logging.getLogger(__name__)


class GithubClient:
    """
    Fetches a user's public repositories from the GitHub REST API.

    The OAuth app credentials, when configured, are sent as basic auth to
    get the authenticated rate limit.
    """

    REPO_LIMIT = 5

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        client_id: str = "",
        client_secret: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_url = api_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GithubClient":
        return cls(
            api_url=settings.github_api_url,
            client_id=settings.github_client_id,
            client_secret=settings.github_client_secret,
            timeout=settings.github_timeout,
        )

    @property
    def is_configured(self) -> bool:
        """Check if OAuth app credentials are set."""
        return bool(self._client_id and self._client_secret)

    async def get_repos(self, username: str) -> list[dict[str, Any]]:
        """
        Get the user's oldest repositories, up to REPO_LIMIT.

        Raises:
            GithubProfileNotFoundError: If GitHub answers with a non-2xx status
            GithubUnavailableError: If the request fails or times out
        """
        auth = (self._client_id, self._client_secret) if self.is_configured else None

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(
                    f"{self._api_url}/users/{username}/repos",
                    params={
                        "per_page": self.REPO_LIMIT,
                        "sort": "created",
                        "direction": "asc",
                    },
                    headers={
                        "Accept": "application/vnd.github+json",
                        "User-Agent": "devhub-api",
                    },
                    auth=auth,
                )
        except httpx.HTTPError as e:
            logger.warning(f"GitHub request for {username} failed: {e}")
            raise GithubUnavailableError(username, str(e))

        if not response.is_success:
            logger.warning(f"GitHub returned {response.status_code} for {username}")
            raise GithubProfileNotFoundError(username, response.status_code)

        return response.json()
