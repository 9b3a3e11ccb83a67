"""Process-wide context shared by request handlers."""

import logging
from dataclasses import dataclass
from typing import Annotated, Any

import httpx
from fastapi import Depends, Request

from octohook.config import Settings


@dataclass(frozen=True)
class AppContext:
    """Settings and logger built once at startup.

    ``transport`` is only set in tests, to stand in for GitHub.
    """

    settings: Settings
    logger: logging.Logger
    transport: httpx.AsyncBaseTransport | None = None

    def http_client(self, **kwargs: Any) -> httpx.AsyncClient:
        """Create a fresh client; callers own it for one request."""
        if self.transport is not None:
            kwargs.setdefault("transport", self.transport)
        return httpx.AsyncClient(**kwargs)


def get_context(request: Request) -> AppContext:
    """Dependency returning the context attached to the running app."""
    return request.app.state.context


ContextDep = Annotated[AppContext, Depends(get_context)]
