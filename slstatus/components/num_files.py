"""Number of entries in a directory."""

from __future__ import annotations

import os

from slstatus.util import warn


def num_files(path: str) -> str | None:
    """Count the entries of a directory, excluding '.' and '..'."""
    try:
        with os.scandir(path) as entries:
            count = sum(1 for _ in entries)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(count)