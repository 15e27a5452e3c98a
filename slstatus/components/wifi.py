"""WiFi link quality and ESSID of a wireless interface."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

from slstatus.util import warn

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
IFNAMSIZ = 16

_IWREQ_SIZE = 32
_MAX_LINE = 1022
_QUALITY = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")
# /proc/net/wireless reports link quality out of 70
_QUALITY_MAX = 70


def wifi_perc(interface: str, root: str = "/") -> str | None:
    """Link quality of a connected interface in percent."""
    operstate = os.path.join(root, "sys", "class", "net", interface, "operstate")
    try:
        with open(operstate, encoding="utf-8", errors="replace") as fp:
            status = fp.readline(4)
    except OSError:
        warn(f"fopen '{operstate}':")
        return None
    if status != "up\n":
        return None

    wireless = os.path.join(root, "proc", "net", "wireless")
    try:
        with open(wireless, encoding="utf-8", errors="replace") as fp:
            lines = [fp.readline(_MAX_LINE) for _ in range(3)]
    except OSError:
        warn(f"fopen '{wireless}':")
        return None

    line = lines[2]
    if not line:
        return None
    pos = line.find(interface)
    if pos < 0:
        return None

    match = _QUALITY.match(line, pos + len(interface) + 2)
    if not match:
        return None
    cur = int(match.group(1))
    return str(int(cur / _QUALITY_MAX * 100))


def wifi_essid(interface: str) -> str | None:
    """ESSID the interface is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = bytearray(
        struct.pack("16sPHH", name, address, len(essid), 0).ljust(_IWREQ_SIZE, b"\0")
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        warn("socket 'AF_INET':")
        return None

    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
        except OSError:
            warn("ioctl 'SIOCGIWESSID':")
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")