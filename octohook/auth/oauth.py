"""GitHub OAuth web application flow."""

import logging
from urllib.parse import urlencode

import httpx

from octohook.auth.models import TokenResponse
from octohook.config import Settings
from octohook.constants import (
    GITHUB_AUTHORIZE_URL,
    GITHUB_OAUTH_SCOPE,
    GITHUB_TOKEN_URL,
    TOKEN_EXCHANGE_TIMEOUT,
)
from octohook.exceptions import NoAccessToken, UpstreamFailure


def build_authorize_url(settings: Settings, state: str | None = None) -> str:
    """Build the GitHub authorize URL the user is redirected to.

    ``state`` is left out of the query string when not given.
    """
    params = {
        "client_id": settings.github_client_id,
        "redirect_uri": settings.redirect_uri,
        "state": state,
        "scope": GITHUB_OAUTH_SCOPE,
    }
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return f"{GITHUB_AUTHORIZE_URL}?{query}"


async def exchange_code_for_token(
    client: httpx.AsyncClient,
    settings: Settings,
    code: str,
    logger: logging.Logger,
) -> str:
    """Exchange an authorization code for an access token.

    Makes a single POST with a 5 second timeout; failures are not retried.
    A rejection reported by GitHub is logged to ``logger``.

    Raises:
        UpstreamFailure: network error, timeout, non-2xx or malformed JSON
        NoAccessToken: GitHub answered without an access token
    """
    try:
        response = await client.post(
            GITHUB_TOKEN_URL,
            data={
                "client_id": settings.github_client_id,
                "client_secret": settings.github_client_secret,
                "code": code,
                "redirect_uri": settings.redirect_uri,
            },
            headers={"Accept": "application/json"},
            timeout=TOKEN_EXCHANGE_TIMEOUT,
        )
        response.raise_for_status()
        token = TokenResponse.model_validate(response.json())
    except httpx.HTTPError as e:
        raise UpstreamFailure(detail=str(e) or type(e).__name__) from e
    except ValueError as e:
        raise UpstreamFailure(detail=f"Malformed token response: {e}") from e

    if not token.access_token:
        if token.error:
            logger.warning(
                f"Token exchange rejected: {token.error_description or token.error}"
            )
        raise NoAccessToken()

    return str(token.access_token)
