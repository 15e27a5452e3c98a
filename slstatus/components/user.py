"""Identity of the current user."""

from __future__ import annotations

import os
import pwd

from slstatus.util import warn


def gid(unused: str | None = None) -> str:
    """Real group id."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Login name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}':")
        return None