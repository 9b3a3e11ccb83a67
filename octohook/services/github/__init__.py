"""GitHub REST API integration."""

from octohook.services.github.client import GitHubClient

__all__ = ["GitHubClient"]
