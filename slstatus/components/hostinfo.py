"""Host name, kernel release and load average."""

from __future__ import annotations

import os
import socket

from slstatus.util import warn


def hostname(unused: str | None = None) -> str | None:
    """Name of this host."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostbyname:")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """Kernel release, as 'uname -r' prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        avgs = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return " ".join(f"{avg:.2f}" for avg in avgs)