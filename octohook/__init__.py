"""GitHub OAuth web flow and webhook receiver."""

__version__ = "0.1.0"
