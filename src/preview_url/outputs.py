"""GitHub Actions output and annotation helpers."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from pathlib import Path


def set_outputs(outputs: Mapping[str, str], path: str | Path | None = None) -> None:
    """Publish several step outputs with a single write.

    Each pair becomes a ``name<<DELIMITER`` block in the ``GITHUB_OUTPUT``
    file so that multi-line values survive.  Without an output file the pairs
    are printed as ``name=value`` on stdout.
    """
    if not path:
        for name, value in outputs.items():
            print(f"{name}={value}")
        return

    blocks = []
    for name, value in outputs.items():
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        blocks.append(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    with open(path, "a", encoding="utf-8") as f:
        f.write("".join(blocks))


def set_output(name: str, value: str, path: str | Path | None = None) -> None:
    """Publish a single step output."""
    set_outputs({name: value}, path)


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_annotation(message: str) -> None:
    """Emit an ``::error::`` workflow command so the runner marks the step failed."""
    print(f"::error::{_escape_data(message)}")
