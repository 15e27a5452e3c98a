"""Battery capacity, charging state and remaining time from sysfs."""

from __future__ import annotations

import os
import re

from slstatus.util import read_text, read_uint

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _read_state(bat: str, root: str) -> str | None:
    text = read_text(os.path.join(root, bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return match.group(0) if match else None


def _pick(bat: str, root: str, *names: str) -> str | None:
    for name in names:
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Battery capacity in percent."""
    text = read_text(os.path.join(root, bat, "capacity"))
    if text is None:
        return None
    match = re.match(r"\s*([+-]?\d+)", text)
    return str(int(match.group(1))) if match else None


def battery_state(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Charging state as '+', '-', 'o' or '?'."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Remaining time while discharging as 'Hh Mm'; empty otherwise."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, root, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_uint(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"