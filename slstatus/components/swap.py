"""Swap figures from /proc/meminfo."""

from __future__ import annotations

import re

from slstatus.util import fmt_human, read_text

MEMINFO = "/proc/meminfo"

_VALUE = re.compile(r"\s*([+-]?\d+)")


def _swap_info(path: str, *names: str) -> dict[str, int] | None:
    """Collect the named fields; None if the file or a field is missing."""
    text = read_text(path)
    if text is None:
        return None
    wanted = set(names)
    found: dict[str, int] = {}
    for line in text.splitlines():
        if not wanted:
            break
        for name in wanted:
            if line.startswith(name):
                match = _VALUE.match(line, len(name) + 1)
                if match:
                    found[name] = int(match.group(1))
                wanted.discard(name)
                break
    return found if len(found) == len(names) else None


def _trunc_div(num: int, den: int) -> int:
    quotient = abs(num) // abs(den)
    return quotient if (num >= 0) == (den > 0) else -quotient


def swap_free(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Free swap."""
    info = _swap_info(path, "SwapFree")
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used swap in percent, not counting swap cache."""
    info = _swap_info(path, "SwapTotal", "SwapFree", "SwapCached")
    if info is None or info["SwapTotal"] == 0:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return str(_trunc_div(100 * used, info["SwapTotal"]))


def swap_total(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Total swap."""
    info = _swap_info(path, "SwapTotal")
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused: str | None = None, path: str = MEMINFO) -> str | None:
    """Used swap, not counting swap cache."""
    info = _swap_info(path, "SwapTotal", "SwapFree", "SwapCached")
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)