"""Secret redaction utilities.

Failure messages are written to the workflow log, and GitHub API errors can
echo request details back.  Redaction is a simple string replacement that
substitutes secrets with the string ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub tokens: ghp_/gho_/ghu_/ghs_/ghr_ or fine-grained github_pat_
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str | None] = ()) -> str:
    """Return ``text`` with secrets and GitHub token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: explicit secret strings to redact; falsy entries are skipped
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
