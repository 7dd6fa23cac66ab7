"""Exceptions raised by the preview URL helper.

Every failure the helper reports belongs to one of three kinds.  Callers can
branch on the exception class or on its ``kind`` attribute instead of
matching message text.
"""

from __future__ import annotations


class PreviewUrlError(Exception):
    """Base exception for preview URL construction failures."""

    kind = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(PreviewUrlError, ValueError):
    """Raised when required inputs are missing or malformed."""

    kind = "invalid_input"


class MissingContextError(PreviewUrlError):
    """Raised when the triggering event carries no pull request."""

    kind = "missing_context"


class ProviderFailureError(PreviewUrlError, RuntimeError):
    """Raised when a commit-info provider could not produce commit details."""

    kind = "provider_failure"
