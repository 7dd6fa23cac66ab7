"""Policies applied to user-visible output."""

from .redaction import redact_secrets

__all__ = ["redact_secrets"]
