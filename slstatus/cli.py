"""Command line entry point: build the status line and publish it."""

from __future__ import annotations

import os
import re
import signal
import socket
import struct
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slstatus import config
from slstatus.config import Arg
from slstatus.util import die, warn

PROG = "slstatus"

_CONVERSION = re.compile(r"%(.?)", re.S)


@dataclass(frozen=True)
class Options:
    """Parsed command line options."""

    to_stdout: bool = False
    once: bool = False


def _usage() -> None:
    die(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the options (without the program name); exit on misuse."""
    args = list(argv)
    to_stdout = once = False
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROG}-{config.VERSION}")
            elif flag == "1":
                once = True
                to_stdout = True
            elif flag == "s":
                to_stdout = True
            else:
                _usage()
    if args:
        _usage()
    return Options(to_stdout=to_stdout, once=once)


def _format(fmt: str, value: str) -> str:
    substituted = False

    def replace(match: re.Match[str]) -> str:
        nonlocal substituted
        spec = match.group(1)
        if spec == "%":
            return "%"
        if spec == "s" and not substituted:
            substituted = True
            return value
        raise ValueError(f"unsupported conversion '%{spec}' in {fmt!r}")

    return _CONVERSION.sub(replace, fmt)


def render_status(entries: Iterable[Arg], unknown: str) -> str:
    """Run every entry and join the formatted results into one status line."""
    pieces: list[bytes] = []
    used = 0
    for entry in entries:
        result = entry.func(entry.args)
        if result is None:
            result = unknown
        try:
            piece = _format(entry.fmt, result).encode("utf-8")
        except ValueError:
            warn("vsnprintf:")
            break
        room = config.MAXLEN - used
        if len(piece) >= room:
            pieces.append(piece[: room - 1])
            warn("vsnprintf: Output truncated")
            break
        pieces.append(piece)
        used += len(piece)
    return b"".join(pieces).decode("utf-8", errors="ignore")


def _pad(data: bytes) -> bytes:
    return data + b"\0" * (-len(data) % 4)


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise OSError("X server closed the connection")
        chunks += chunk
    return bytes(chunks)


def _parse_display(name: str) -> tuple[str, int, int]:
    host, sep, rest = name.rpartition(":")
    if not sep:
        raise OSError(f"invalid display name {name!r}")
    if "/" in host:
        host = host.split("/", 1)[1]
    number, _, screen = rest.partition(".")
    try:
        return host, int(number), int(screen or 0)
    except ValueError:
        raise OSError(f"invalid display name {name!r}") from None


def _connect(host: str, number: int) -> socket.socket:
    if host in ("", "unix"):
        path = f"/tmp/.X11-unix/X{number}"
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            try:
                sock.connect(path)
            except OSError:
                if not sys.platform.startswith("linux"):
                    raise
                sock.connect("\0" + path)
        except OSError:
            sock.close()
            raise
        return sock
    return socket.create_connection((host, 6000 + number))


def _read_xauthority(host: str, number: int) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.join(
        os.path.expanduser("~"), ".Xauthority"
    )
    try:
        with open(path, "rb") as fp:
            data = fp.read()
    except OSError:
        return b"", b""

    local = host in ("", "unix", "localhost")
    own_name = socket.gethostname().encode()
    wanted_number = str(number).encode()
    pos = 0
    while pos + 2 <= len(data):
        (family,) = struct.unpack_from(">H", data, pos)
        pos += 2
        fields = []
        for _ in range(4):
            if pos + 2 > len(data):
                return b"", b""
            (length,) = struct.unpack_from(">H", data, pos)
            pos += 2
            fields.append(data[pos : pos + length])
            pos += length
        address, entry_number, auth_name, auth_data = fields
        if entry_number not in (b"", wanted_number):
            continue
        if (
            family == 0xFFFF
            or (local and family == 256 and address == own_name)
            or (not local and address == host.encode())
        ):
            return auth_name, auth_data
    return b"", b""


class _XDisplay:
    """Minimal X11 connection able to set the root window name."""

    _CHANGE_PROPERTY = 18
    _WM_NAME = 39
    _STRING = 31

    def __init__(self, sock: socket.socket, root: int) -> None:
        self._sock = sock
        self.root = root

    @classmethod
    def open(cls, name: str | None = None) -> _XDisplay:
        name = name or os.environ.get("DISPLAY")
        if not name:
            raise OSError("DISPLAY is not set")
        host, number, screen = _parse_display(name)
        sock = _connect(host, number)
        try:
            root = cls._handshake(sock, host, number, screen)
        except (OSError, struct.error, IndexError):
            sock.close()
            raise OSError("X connection setup failed") from None
        return cls(sock, root)

    @staticmethod
    def _handshake(sock: socket.socket, host: str, number: int, screen: int) -> int:
        auth_name, auth_data = _read_xauthority(host, number)
        request = struct.pack(
            "<BxHHHH2x", 0x6C, 11, 0, len(auth_name), len(auth_data)
        ) + _pad(auth_name) + _pad(auth_data)
        sock.sendall(request)

        status, reason_len, _major, _minor, extra = struct.unpack(
            "<BBHHH", _recv_exact(sock, 8)
        )
        body = _recv_exact(sock, extra * 4)
        if status != 1:
            reason = body[:reason_len] if status == 0 else body
            raise OSError(reason.decode("latin-1").strip("\0 "))

        (vendor_len,) = struct.unpack_from("<H", body, 16)
        screens, formats = body[20], body[21]
        if screen >= screens:
            raise OSError(f"no screen {screen}")
        pos = 32 + vendor_len + (-vendor_len % 4) + 8 * formats
        for _ in range(screen):
            depths = body[pos + 39]
            pos += 40
            for _ in range(depths):
                (visuals,) = struct.unpack_from("<H", body, pos + 2)
                pos += 8 + 24 * visuals
        (root,) = struct.unpack_from("<I", body, pos)
        return root

    def store_name(self, name: str | None) -> None:
        """Set (or with None, clear) the name of the root window."""
        data = name.encode("utf-8") if name else b""
        padded = _pad(data)
        request = struct.pack(
            "<BBHIIIB3xI",
            self._CHANGE_PROPERTY,
            0,
            6 + len(padded) // 4,
            self.root,
            self._WM_NAME,
            self._STRING,
            8,
            len(data),
        ) + padded
        self._sock.sendall(request)

    def close(self) -> None:
        self._sock.close()


def _run(options: Options, stop: threading.Event, wake: threading.Event) -> None:
    display = None
    if not options.to_stdout:
        try:
            display = _XDisplay.open()
        except OSError:
            die("XOpenDisplay: Failed to open display")

    interval = config.INTERVAL / 1000
    while True:
        start = time.monotonic()
        status = render_status(config.ARGS, config.UNKNOWN_STR)

        if display is None:
            try:
                print(status, flush=True)
            except OSError:
                die("puts:")
        else:
            try:
                display.store_name(status)
            except OSError:
                die("XStoreName: Allocation failed")

        if stop.is_set():
            break
        remaining = interval - (time.monotonic() - start)
        if remaining >= 0:
            wake.wait(remaining)
            wake.clear()
        if stop.is_set():
            break

    if display is not None:
        try:
            display.store_name(None)
        except OSError:
            pass
        try:
            display.close()
        except OSError:
            die("XCloseDisplay: Failed to close display")


def main(argv: Sequence[str] | None = None) -> int:
    """Publish the status line until interrupted (or once with -1)."""
    options = parse_args(sys.argv[1:] if argv is None else argv)

    stop = threading.Event()
    wake = threading.Event()
    if options.once:
        stop.set()

    def terminate(signo: int, _frame: object) -> None:
        if signo != signal.SIGUSR1:
            stop.set()
        wake.set()

    previous = {}
    if threading.current_thread() is threading.main_thread():
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            previous[signo] = signal.signal(signo, terminate)
    try:
        _run(options, stop, wake)
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)
    return 0