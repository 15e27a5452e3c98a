"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_UINT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Print a diagnostic to stderr.

    A message ending in ':' is followed by the description of the
    exception currently being handled, if any.
    """
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if isinstance(exc, OSError) and exc.strerror:
            detail = exc.strerror
        elif exc is not None:
            detail = str(exc)
        else:
            detail = "Unknown error"
        print(f"{message} {detail}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def die(message: str) -> None:
    """Print a diagnostic and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def fmt_human(num: float, base: int) -> str:
    """Scale a number by 1000 or 1024 and append the matching unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the contents of a file, or None (with a warning) if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fp:
            return fp.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None


def read_uint(path: str) -> int | None:
    """Read the leading unsigned integer of a file, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _UINT.match(text)
    return int(match.group(1)) if match else None