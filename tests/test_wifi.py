from unittest import mock

import pytest

from slstatus.components.wifi import SIOCGIWESSID, wifi_essid, wifi_perc

HEADER = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
)


def _make_root(tmp_path, iface, state, wireless):
    net = tmp_path / "sys" / "class" / "net" / iface
    net.mkdir(parents=True)
    (net / "operstate").write_text(state)
    proc = tmp_path / "proc" / "net"
    proc.mkdir(parents=True)
    if wireless is not None:
        (proc / "wireless").write_text(wireless)
    return str(tmp_path)


def _line(iface, quality):
    return f"{iface}: 0000   {quality}.  -40.  -256        0      0      0      0      0        0\n"


@pytest.mark.parametrize("quality, expected", [("70", "100"), ("35", "50"), ("0", "0")])
def test_wifi_perc_quality(tmp_path, quality, expected):
    root = _make_root(tmp_path, "wlan0", "up\n", HEADER + _line("wlan0", quality))
    assert wifi_perc("wlan0", root) == expected


def test_wifi_perc_is_bounded_by_max_quality(tmp_path):
    root = _make_root(tmp_path, "wlan0", "up\n", HEADER + _line("wlan0", "53"))
    result = int(wifi_perc("wlan0", root))
    assert 0 <= result <= 100


def test_wifi_perc_interface_down(tmp_path):
    root = _make_root(tmp_path, "wlan0", "down\n", HEADER + _line("wlan0", "70"))
    assert wifi_perc("wlan0", root) is None


def test_wifi_perc_missing_operstate(tmp_path):
    assert wifi_perc("wlan0", str(tmp_path)) is None


def test_wifi_perc_missing_wireless_file(tmp_path):
    root = _make_root(tmp_path, "wlan0", "up\n", None)
    assert wifi_perc("wlan0", root) is None


def test_wifi_perc_no_data_line(tmp_path):
    root = _make_root(tmp_path, "wlan0", "up\n", HEADER)
    assert wifi_perc("wlan0", root) is None


def test_wifi_perc_other_interface(tmp_path):
    root = _make_root(tmp_path, "wlan0", "up\n", HEADER + _line("wlan1x", "70").replace("wlan1x", "eth9"))
    assert wifi_perc("wlan0", root) is None


def test_wifi_essid_name_too_long():
    with mock.patch("fcntl.ioctl") as ioctl:
        assert wifi_essid("a" * 16) is None
    assert ioctl.call_count == 0


def test_wifi_essid_ioctl_failure_and_request():
    seen = []

    def ioctl(fd, request, arg):
        seen.append((request, bytes(arg)))
        raise OSError(19, "No such device")

    with mock.patch("fcntl.ioctl", side_effect=ioctl):
        assert wifi_essid("wlan0") is None
    assert seen[0][0] == SIOCGIWESSID
    assert seen[0][1].startswith(b"wlan0\0")


def test_wifi_essid_empty_result():
    with mock.patch("fcntl.ioctl", return_value=0) as ioctl:
        assert wifi_essid("wlan0") is None
    assert ioctl.call_count == 1