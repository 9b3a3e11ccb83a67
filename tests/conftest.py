"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from octohook.config import Settings
from octohook.main import create_app

TEST_ACCESS_TOKEN = "gho_testtoken"


class FakeGitHub:
    """Stand-in for github.com and api.github.com behind an httpx MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_payload: Any = {"access_token": TEST_ACCESS_TOKEN, "token_type": "bearer"}
        self.token_status = 200
        self.token_error: Exception | None = None
        self.user_payload: Any = {"id": 1, "login": "octocat"}
        self.user_status = 200
        self.repos_payload: Any = [
            {"id": 10, "full_name": "octocat/hello-world", "description": "My first repo"},
            {"id": 11, "full_name": "octocat/spoon-knife", "description": None},
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "github.com" and request.url.path == "/login/oauth/access_token":
            if self.token_error is not None:
                raise self.token_error
            return httpx.Response(self.token_status, json=self.token_payload)
        if request.url.host == "api.github.com" and request.url.path == "/user":
            return httpx.Response(self.user_status, json=self.user_payload)
        if request.url.host == "api.github.com" and request.url.path == "/user/repos":
            return httpx.Response(200, json=self.repos_payload)
        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "activity_log.log"


@pytest.fixture
def settings(log_file: Path) -> Settings:
    """Settings independent of the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        app_env="test",
        base_url=None,
        port=8080,
        github_client_id="test-client-id",
        github_client_secret="test-client-secret",
        log_file=str(log_file),
    )


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def app(settings: Settings, github: FakeGitHub) -> FastAPI:
    return create_app(settings, transport=github.transport)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
