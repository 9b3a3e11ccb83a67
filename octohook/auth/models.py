"""Authentication-related Pydantic models."""

from typing import Any

from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Body of GitHub's access token endpoint."""

    # Not constrained to str; only truthiness decides whether a token was issued
    access_token: Any = None
    token_type: str | None = None
    scope: str | None = None
    error: str | None = None
    error_description: str | None = None


class GitHubUser(BaseModel):
    """GitHub user data from the authenticated-user endpoint."""

    id: int
    login: str
    email: str | None = None
    avatar_url: str | None = None
    name: str | None = None


class GitHubRepository(BaseModel):
    """Subset of a repository entry from the repository list endpoint."""

    id: int
    full_name: str
    description: str | None = None
    private: bool = False
