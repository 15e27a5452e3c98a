"""Master volume of an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from slstatus.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_INT = struct.Struct("i")
_IOC_READ = 2


def _ior(kind: str, number: int, size: int) -> int:
    return (_IOC_READ << 30) | (size << 16) | (ord(kind) << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE, _INT.size)


def _mixer_read(device: int) -> int:
    return _ior("M", device, _INT.size)


def _read_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, bytes(_INT.size))
    return _INT.unpack(result[: _INT.size])[0]


def vol_perc(card: str) -> str | None:
    """Left-channel master volume in percent, read from a mixer device."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    level = None
    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        for index, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << index) and name == "vol":
                try:
                    level = _read_int(fd, _mixer_read(index))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({index})':")
                    return None
    finally:
        os.close(fd)

    return None if level is None else str(level & 0xFF)