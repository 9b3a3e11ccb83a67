"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from octohook import __version__
from octohook.api import api_router
from octohook.config import Settings, get_settings
from octohook.context import AppContext
from octohook.exceptions import OctohookError
from octohook.utils.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    ctx: AppContext = app.state.context
    ctx.logger.info(f"Server running at {ctx.settings.effective_base_url}")
    yield
    ctx.logger.info("Server shutting down")


async def octohook_error_handler(request: Request, exc: OctohookError) -> PlainTextResponse:
    """Render application errors as plain text with their status code."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application.

    Settings are loaded from the environment when not given, which fails
    fast if the GitHub client credentials are missing.

    Args:
        settings: Preloaded settings
        transport: Replacement httpx transport for outbound GitHub calls
    """
    settings = settings or get_settings()
    logger = setup_logging(settings)

    app = FastAPI(
        title="octohook",
        description="GitHub OAuth web flow and webhook receiver",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
    )
    app.state.context = AppContext(settings=settings, logger=logger, transport=transport)
    app.state.started_at = datetime.now(UTC)

    app.add_exception_handler(OctohookError, octohook_error_handler)
    app.include_router(api_router)

    @app.get("/health", tags=["monitoring"])
    async def health_check() -> JSONResponse:
        """Liveness probe for monitoring and load balancers."""
        now = datetime.now(UTC)
        return JSONResponse(
            content={
                "status": "healthy",
                "timestamp": now.isoformat(),
                "uptime_seconds": (now - app.state.started_at).total_seconds(),
                "version": __version__,
            }
        )

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
