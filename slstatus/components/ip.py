"""IPv4 and IPv6 addresses of a network interface."""

from __future__ import annotations

import socket

import psutil

from slstatus.util import warn


def _ip(interface: str, family: socket.AddressFamily) -> str | None:
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None
    for addr in interfaces.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of the interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of the interface."""
    return _ip(interface, socket.AF_INET6)