"""Event-type dispatch for GitHub webhook deliveries."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from octohook.exceptions import UnhandledPayloadShape
from octohook.webhooks.models import (
    IssuesEvent,
    MemberEvent,
    OrganizationEvent,
    PushEvent,
    RepositoryEvent,
    UnknownEvent,
    WebhookEvent,
)


def summarize_push(event: PushEvent) -> str:
    return f"Push event: {event.ref} - {event.repository.full_name}"


def summarize_issues(event: IssuesEvent) -> str:
    return f"Issue event: {event.issue.title} - {event.repository.full_name}"


def summarize_member(event: MemberEvent) -> str:
    return f"New member added: {event.member.login} to {event.organization.login}"


def summarize_repository(event: RepositoryEvent) -> str:
    return f"Repository event: {event.repository.full_name} - Action: {event.action}"


def summarize_organization(event: OrganizationEvent) -> str:
    return f"Organization event: {event.organization.login} - Action: {event.action}"


def summarize_unknown(event: UnknownEvent) -> str:
    return f"Unhandled event type: {event.event_type}"


EVENT_HANDLERS: dict[str, tuple[type[BaseModel], Callable[[Any], str]]] = {
    "push": (PushEvent, summarize_push),
    "issues": (IssuesEvent, summarize_issues),
    "member": (MemberEvent, summarize_member),
    "repository": (RepositoryEvent, summarize_repository),
    "organization": (OrganizationEvent, summarize_organization),
}


def _format_errors(error: ValidationError) -> str:
    """Flatten pydantic errors to ``loc: msg`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()
    )


def parse_event(event_type: str, payload: Any) -> WebhookEvent:
    """Validate a payload against the model registered for its event type.

    Unregistered types become an ``UnknownEvent``.

    Raises:
        UnhandledPayloadShape: the payload is missing fields its type requires
    """
    entry = EVENT_HANDLERS.get(event_type)
    if entry is None:
        return UnknownEvent(event_type=event_type, payload=payload)

    model, _ = entry
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise UnhandledPayloadShape(event_type, _format_errors(e)) from e


def summarize_event(event_type: str, payload: Any) -> str:
    """Return the one-line summary for a webhook delivery."""
    event = parse_event(event_type, payload)
    if isinstance(event, UnknownEvent):
        return summarize_unknown(event)
    _, summarize = EVENT_HANDLERS[event_type]
    return summarize(event)
