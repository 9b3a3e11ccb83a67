"""Tests for webhook payload parsing and summaries."""

import pytest

from octohook.exceptions import InvalidPayload, UnhandledPayloadShape
from octohook.webhooks import EVENT_HANDLERS, parse_event, summarize_event
from octohook.webhooks.models import PushEvent, UnknownEvent


class TestParseEvent:
    """Tests for parse_event."""

    def test_known_type_returns_typed_model(self):
        event = parse_event("push", {"ref": "refs/tags/v1", "repository": {"full_name": "a/b"}})
        assert isinstance(event, PushEvent)
        assert event.repository.full_name == "a/b"

    def test_unknown_type_keeps_raw_payload(self):
        event = parse_event("star", {"action": "deleted"})
        assert isinstance(event, UnknownEvent)
        assert event.event_type == "star"
        assert event.payload == {"action": "deleted"}

    def test_extra_fields_are_ignored(self):
        event = parse_event(
            "push",
            {
                "ref": "refs/heads/main",
                "before": "0000000",
                "repository": {"full_name": "a/b", "private": True},
                "commits": [],
            },
        )
        assert event.ref == "refs/heads/main"

    def test_missing_nested_field(self):
        with pytest.raises(UnhandledPayloadShape) as exc_info:
            parse_event("member", {"member": {"login": "hubot"}, "organization": {}})

        error = exc_info.value
        assert error.event_type == "member"
        assert error.status_code == 400
        assert error.message == "Malformed member payload"
        assert "organization.login" in error.detail

    def test_non_object_payload(self):
        with pytest.raises(UnhandledPayloadShape):
            parse_event("repository", ["not", "an", "object"])

    def test_shape_error_is_an_invalid_payload(self):
        assert issubclass(UnhandledPayloadShape, InvalidPayload)


class TestSummarizeEvent:
    """Tests for summarize_event."""

    def test_every_registered_type_has_a_summary(self):
        assert set(EVENT_HANDLERS) == {"push", "issues", "member", "repository", "organization"}

    def test_push_summary(self):
        summary = summarize_event(
            "push", {"ref": "refs/heads/main", "repository": {"full_name": "org/repo"}}
        )
        assert summary == "Push event: refs/heads/main - org/repo"

    def test_issues_summary_without_action(self):
        summary = summarize_event(
            "issues", {"issue": {"title": "Crash on start"}, "repository": {"full_name": "org/repo"}}
        )
        assert summary == "Issue event: Crash on start - org/repo"

    def test_repository_requires_action(self):
        with pytest.raises(UnhandledPayloadShape):
            summarize_event("repository", {"repository": {"full_name": "org/repo"}})

    def test_unhandled_summary(self):
        assert summarize_event("ping", {"zen": "Keep it logically awesome."}) == (
            "Unhandled event type: ping"
        )

    def test_summary_is_deterministic(self):
        payload = {"action": "renamed", "organization": {"login": "github"}}
        assert summarize_event("organization", payload) == summarize_event("organization", payload)
