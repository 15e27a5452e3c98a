import socket
from collections import namedtuple
from unittest import mock

import pytest

from slstatus.components.ip import ipv4, ipv6

Addr = namedtuple("Addr", "family address netmask broadcast ptp")

_ADDRS = {
    "eth0": [
        Addr(socket.AF_INET, "192.0.2.10", "255.255.255.0", None, None),
        Addr(socket.AF_INET6, "2001:db8::1", None, None, None),
        Addr(socket.AF_INET, "192.0.2.11", "255.255.255.0", None, None),
    ],
    "wlan0": [Addr(socket.AF_INET, "198.51.100.7", None, None, None)],
}


@pytest.fixture
def addrs():
    with mock.patch("psutil.net_if_addrs", return_value=_ADDRS):
        yield


def test_ipv4_first_match(addrs):
    assert ipv4("eth0") == "192.0.2.10"


def test_ipv6(addrs):
    assert ipv6("eth0") == "2001:db8::1"


def test_ipv6_absent(addrs):
    assert ipv6("wlan0") is None


def test_unknown_interface(addrs):
    assert ipv4("eth9") is None


def test_getifaddrs_failure(capsys):
    with mock.patch("psutil.net_if_addrs", side_effect=OSError(1, "denied")):
        assert ipv4("eth0") is None
    assert "getifaddrs" in capsys.readouterr().err