"""First line of an arbitrary file."""

from __future__ import annotations

from slstatus.util import warn

_MAX_LINE = 1022


def cat(path: str) -> str | None:
    """Return the first line of a file without its newline, or None if empty."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            line = fp.readline(_MAX_LINE)
    except OSError:
        warn(f"fopen '{path}':")
        return None

    newline = line.rfind("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None