"""Payload shapes for the webhook events we summarize.

Only the fields read by the summaries are declared; GitHub sends many more
and they are ignored.
"""

from typing import Any

from pydantic import BaseModel


class RepositoryRef(BaseModel):
    full_name: str


class AccountRef(BaseModel):
    login: str


class IssueRef(BaseModel):
    title: str


class PushEvent(BaseModel):
    """``push``: commits pushed to a ref."""

    ref: str
    repository: RepositoryRef


class IssuesEvent(BaseModel):
    """``issues``: issue opened, edited, closed, ..."""

    action: str | None = None
    issue: IssueRef
    repository: RepositoryRef


class MemberEvent(BaseModel):
    """``member``: collaborator added to a repository or organization."""

    action: str | None = None
    member: AccountRef
    organization: AccountRef


class RepositoryEvent(BaseModel):
    """``repository``: repository created, deleted, renamed, ..."""

    action: str
    repository: RepositoryRef


class OrganizationEvent(BaseModel):
    """``organization``: membership or organization lifecycle change."""

    action: str
    organization: AccountRef


class UnknownEvent(BaseModel):
    """Any event type without a dedicated model."""

    event_type: str
    payload: Any = None


WebhookEvent = (
    PushEvent
    | IssuesEvent
    | MemberEvent
    | RepositoryEvent
    | OrganizationEvent
    | UnknownEvent
)
