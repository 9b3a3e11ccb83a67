"""Authentication module."""

from octohook.auth.oauth import build_authorize_url, exchange_code_for_token

__all__ = [
    "build_authorize_url",
    "exchange_code_for_token",
]
