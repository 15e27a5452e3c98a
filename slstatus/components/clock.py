"""Formatted local date and time."""

from __future__ import annotations

import time

from slstatus.util import warn

_BUFFER_SIZE = 1024


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    try:
        result = time.strftime(fmt, time.localtime())
    except ValueError:
        result = ""
    if not result or len(result.encode("utf-8")) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result