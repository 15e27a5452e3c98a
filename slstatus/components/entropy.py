"""Available kernel entropy."""

from __future__ import annotations

import sys

from slstatus.util import read_uint

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"
INFINITY = "\u221e"


def entropy(unused: str | None = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Bits of entropy available; the BSDs always report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return INFINITY
    num = read_uint(path)
    return None if num is None else str(num)