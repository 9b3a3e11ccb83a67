"""GitHub webhook receiver."""

import json
from typing import Annotated

from fastapi import APIRouter, Header, Request
from fastapi.responses import PlainTextResponse

from octohook.context import ContextDep
from octohook.exceptions import InvalidPayload, MissingEventType, UnhandledPayloadShape
from octohook.webhooks import summarize_event

router = APIRouter()


@router.post("/webhook", response_class=PlainTextResponse)
async def receive_webhook(
    request: Request,
    ctx: ContextDep,
    x_github_event: Annotated[str | None, Header()] = None,
    x_github_delivery: Annotated[str | None, Header()] = None,
) -> str:
    """Log an incoming GitHub event and a one-line summary of it."""
    if not x_github_event:
        ctx.logger.warning("Received webhook with no event type")
        raise MissingEventType()

    body = await request.body()
    try:
        # An empty body is treated as an empty object
        payload = json.loads(body) if body.strip() else {}
    except ValueError as e:
        ctx.logger.warning(f"Received {x_github_event} webhook with invalid JSON: {e}")
        raise InvalidPayload() from e

    ctx.logger.info(f"Received GitHub event: {x_github_event}")
    if x_github_delivery:
        ctx.logger.debug(f"Delivery ID: {x_github_delivery}")
    ctx.logger.info(f"Event payload: {json.dumps(payload, indent=2)}")

    try:
        summary = summarize_event(x_github_event, payload)
    except UnhandledPayloadShape as e:
        ctx.logger.warning(f"{e.message}: {e.detail}")
        raise

    ctx.logger.info(summary)
    return "Webhook received successfully"
