"""Read-only GitHub REST API client authenticated with a user token."""

from typing import Any

import httpx

from octohook.auth.models import GitHubRepository, GitHubUser
from octohook.constants import GITHUB_API_URL, GITHUB_API_VERSION
from octohook.exceptions import UpstreamFailure


class GitHubClient:
    """Client for the authenticated user's GitHub data.

    Wraps an ``httpx.AsyncClient`` owned by the caller. The token is held only
    for the lifetime of this object.
    """

    def __init__(self, client: httpx.AsyncClient, access_token: str) -> None:
        self._client = client
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def _get(self, path: str) -> Any:
        """GET a REST endpoint and return the decoded JSON body."""
        try:
            response = await self._client.get(
                f"{GITHUB_API_URL}{path}",
                headers=self._headers,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise UpstreamFailure(detail=str(e) or type(e).__name__) from e
        except ValueError as e:
            raise UpstreamFailure(detail=f"Malformed response from {path}: {e}") from e

    async def get_authenticated_user(self) -> GitHubUser:
        """Fetch the profile of the token's owner."""
        data = await self._get("/user")
        try:
            return GitHubUser.model_validate(data)
        except ValueError as e:
            raise UpstreamFailure(detail=f"Unexpected user payload: {e}") from e

    async def list_repositories(self) -> list[GitHubRepository]:
        """List repositories for the token's owner (first page only)."""
        data = await self._get("/user/repos")
        if not isinstance(data, list):
            raise UpstreamFailure(detail="Unexpected repository list payload")
        try:
            return [GitHubRepository.model_validate(item) for item in data]
        except ValueError as e:
            raise UpstreamFailure(detail=f"Unexpected repository payload: {e}") from e
