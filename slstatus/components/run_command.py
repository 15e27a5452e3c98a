"""First line of a shell command's output."""

from __future__ import annotations

import subprocess

from slstatus.util import warn

_MAX_LINE = 1022


def run_command(cmd: str) -> str | None:
    """Run a command through the shell and return its first output line."""
    try:
        proc = subprocess.Popen(cmd, shell=True, stdout=subprocess.PIPE)
    except OSError:
        warn(f"popen '{cmd}':")
        return None

    with proc:
        assert proc.stdout is not None
        raw = proc.stdout.readline(_MAX_LINE)
        proc.stdout.close()
        proc.wait()

    line = raw.decode("utf-8", errors="replace")
    newline = line.rfind("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None