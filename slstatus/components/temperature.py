"""Temperature from a thermal sensor file."""

from __future__ import annotations

from slstatus.util import read_uint


def temp(file: str) -> str | None:
    """Whole degrees Celsius from a sensor file holding millidegrees."""
    millidegrees = read_uint(file)
    if millidegrees is None:
        return None
    return str(millidegrees // 1000)