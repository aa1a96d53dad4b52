# src/bedrock_review/exceptions.py
from typing import Any


class ReviewError(Exception):
    """Base exception for a failed file review."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DiffError(ReviewError):
    """git could not produce a patch for the file."""


class InvocationError(ReviewError):
    """The model call failed (network, auth, quota, bad config)."""


class ParseError(ReviewError):
    """The model response could not be decoded into a completion."""


class PublishError(ReviewError):
    """Posting the pull request comment failed."""
