"""Memory figures from /proc/meminfo."""

from __future__ import annotations

import re

from slstatus.util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_ORDER = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")


def _leading_fields(path: str, count: int) -> list[int] | None:
    """Read the first `count` fields, which must appear in the fixed order."""
    text = read_text(path)
    if text is None:
        return None
    pattern = "".join(rf"\s*{name}:\s*(\d+)\s*kB" for name in _ORDER[:count])
    match = re.match(pattern, text)
    if not match:
        return None
    return [int(value) for value in match.groups()]


def ram_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Available memory."""
    fields = _leading_fields(path, 3)
    if fields is None:
        return None
    return fmt_human(fields[2] * 1024, 1024)


def ram_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used memory in percent, not counting buffers and cache."""
    fields = _leading_fields(path, 5)
    if fields is None:
        return None
    total, free, _available, buffers, cached = fields
    if total == 0:
        return None
    used = (total - free) - (buffers + cached)
    return str(int(100 * used / total))


def ram_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Total memory."""
    fields = _leading_fields(path, 1)
    if fields is None:
        return None
    return fmt_human(fields[0] * 1024, 1024)


def ram_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used memory, not counting buffers and cache."""
    fields = _leading_fields(path, 5)
    if fields is None:
        return None
    total, free, _available, buffers, cached = fields
    return fmt_human((total - free - buffers - cached) * 1024, 1024)