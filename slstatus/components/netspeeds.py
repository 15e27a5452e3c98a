"""Receive and transmit speed of a network interface."""

from __future__ import annotations

import os

from slstatus.util import fmt_human, read_uint

NET_ROOT = "/sys/class/net"
INTERVAL = 1000  # ms between two samples

_COUNTER_WRAP = 1 << 64


class NetSpeedMeter:
    """Bytes per second on one interface counter since the previous call."""

    def __init__(self, counter: str, interval: int = INTERVAL, root: str = NET_ROOT) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.counter = counter
        self.interval = interval
        self.root = root
        self._bytes = 0

    def _path(self, interface: str) -> str:
        return os.path.join(self.root, interface, "statistics", self.counter)

    def __call__(self, interface: str) -> str | None:
        previous = self._bytes
        current = read_uint(self._path(interface))
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _COUNTER_WRAP
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeedMeter("rx_bytes")
_tx = NetSpeedMeter("tx_bytes")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of the interface."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of the interface."""
    return _tx(interface)