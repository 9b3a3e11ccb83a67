"""OAuth login and callback endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, RedirectResponse

from octohook.auth import build_authorize_url, exchange_code_for_token
from octohook.context import ContextDep
from octohook.exceptions import MissingCode, NoAccessToken, UpstreamFailure
from octohook.services.github import GitHubClient

router = APIRouter()


@router.get("/login")
async def login(ctx: ContextDep) -> RedirectResponse:
    """Redirect the user to GitHub's authorize page."""
    url = build_authorize_url(ctx.settings)
    ctx.logger.info("Redirecting to GitHub for authorization")
    return RedirectResponse(url=url, status_code=302)


@router.get("/callback", response_class=PlainTextResponse)
async def callback(ctx: ContextDep, code: str | None = None) -> str:
    """Handle GitHub's redirect: exchange the code and log the user's repositories."""
    if not code:
        raise MissingCode()

    try:
        async with ctx.http_client() as client:
            access_token = await exchange_code_for_token(
                client, ctx.settings, code, ctx.logger
            )
            ctx.logger.info("OAuth authorization successful")

            github = GitHubClient(client, access_token)
            user = await github.get_authenticated_user()
            ctx.logger.info(f"Authenticated as {user.login}")

            repos = await github.list_repositories()
            ctx.logger.info(f"Repositories: {len(repos)}")
            for repo in repos:
                ctx.logger.info(f"Repo: {repo.full_name} - {repo.description}")
    except NoAccessToken:
        raise
    except UpstreamFailure as e:
        ctx.logger.error(f"Error during OAuth flow: {e.detail}")
        raise
    except Exception as e:
        ctx.logger.error(f"Unexpected error: {e}")
        raise UpstreamFailure(detail=str(e)) from e

    return "OAuth Flow Complete!"
