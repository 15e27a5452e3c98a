"""Status bar configuration: update interval, placeholder text and entries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from slstatus.components.battery import battery_perc, battery_remaining, battery_state
from slstatus.components.cat import cat
from slstatus.components.clock import datetime
from slstatus.components.cpu import cpu_freq, cpu_perc
from slstatus.components.disk import disk_free, disk_perc, disk_total, disk_used
from slstatus.components.entropy import entropy
from slstatus.components.hostinfo import hostname, kernel_release, load_avg
from slstatus.components.ip import ipv4, ipv6
from slstatus.components.netspeeds import netspeed_rx, netspeed_tx
from slstatus.components.num_files import num_files
from slstatus.components.ram import ram_free, ram_perc, ram_total, ram_used
from slstatus.components.run_command import run_command
from slstatus.components.swap import swap_free, swap_perc, swap_total, swap_used
from slstatus.components.temperature import temp
from slstatus.components.uptime import uptime
from slstatus.components.user import gid, uid, username
from slstatus.components.volume import vol_perc
from slstatus.components.wifi import wifi_essid, wifi_perc

VERSION = "1.0"

# interval between updates (in ms)
INTERVAL = 1000

# text to show if no value can be retrieved
UNKNOWN_STR = "n/a"

# maximum output string length, in bytes, including the terminator
MAXLEN = 2048


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, the format it is shown with, its argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    args: str | None = None


COMPONENTS: dict[str, Callable[..., str | None]] = {
    "battery_perc": battery_perc,
    "battery_remaining": battery_remaining,
    "battery_state": battery_state,
    "cat": cat,
    "cpu_freq": cpu_freq,
    "cpu_perc": cpu_perc,
    "datetime": datetime,
    "disk_free": disk_free,
    "disk_perc": disk_perc,
    "disk_total": disk_total,
    "disk_used": disk_used,
    "entropy": entropy,
    "gid": gid,
    "hostname": hostname,
    "ipv4": ipv4,
    "ipv6": ipv6,
    "kernel_release": kernel_release,
    "load_avg": load_avg,
    "netspeed_rx": netspeed_rx,
    "netspeed_tx": netspeed_tx,
    "num_files": num_files,
    "ram_free": ram_free,
    "ram_perc": ram_perc,
    "ram_total": ram_total,
    "ram_used": ram_used,
    "run_command": run_command,
    "swap_free": swap_free,
    "swap_perc": swap_perc,
    "swap_total": swap_total,
    "swap_used": swap_used,
    "temp": temp,
    "uid": uid,
    "uptime": uptime,
    "username": username,
    "vol_perc": vol_perc,
    "wifi_essid": wifi_essid,
    "wifi_perc": wifi_perc,
}

DEFAULT_ARGS: tuple[Arg, ...] = (
    Arg(datetime, "%s", "%F %T"),
)

ARGS: tuple[Arg, ...] = (
    Arg(cpu_perc, "CPU: [%s%%]"),
    Arg(ram_perc, "       MEM: [%s%%]"),
    Arg(uptime, "       UPTIME: [%s]"),
    Arg(netspeed_tx, "       UP: [%s]", "wlan0"),
    Arg(netspeed_rx, "       DOWN: [%s]", "wlan0"),
    Arg(battery_perc, "       BAT: [%s%%]", "BAT0"),
    Arg(datetime, "       %s", "%F %T"),
)