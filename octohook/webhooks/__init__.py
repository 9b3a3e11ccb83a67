"""GitHub webhook parsing and summaries."""

from octohook.webhooks.dispatch import EVENT_HANDLERS, parse_event, summarize_event

__all__ = [
    "EVENT_HANDLERS",
    "parse_event",
    "summarize_event",
]
