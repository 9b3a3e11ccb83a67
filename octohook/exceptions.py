"""Error conditions raised by the OAuth flow and the webhook receiver.

Each error carries the HTTP status and the short plain-text message returned
to the caller. They are rendered by a single exception handler in
``octohook.main``.
"""


class OctohookError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500
    message: str = "Something went wrong"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        if message is not None:
            self.message = message
        # Internal detail is logged, never sent to the client
        self.detail = detail or self.message
        super().__init__(self.detail)


class MissingCode(OctohookError):
    """The OAuth callback was hit without an authorization code."""

    status_code = 400
    message = "No code provided"


class NoAccessToken(OctohookError):
    """The token exchange response had no ``access_token``."""

    status_code = 400
    message = "No access token received"


class UpstreamFailure(OctohookError):
    """GitHub could not be reached, answered non-2xx, or sent malformed JSON."""

    status_code = 500
    message = "Something went wrong"


class MissingEventType(OctohookError):
    """A webhook delivery arrived without the event-type header."""

    status_code = 400
    message = "Missing GitHub event type"


class InvalidPayload(OctohookError):
    """A webhook body could not be decoded as JSON."""

    status_code = 400
    message = "Invalid JSON payload"


class UnhandledPayloadShape(InvalidPayload):
    """A recognized event whose payload lacks the fields its summary needs."""

    def __init__(self, event_type: str, detail: str) -> None:
        super().__init__(f"Malformed {event_type} payload", detail=detail)
        self.event_type = event_type
