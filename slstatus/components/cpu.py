"""CPU frequency and usage."""

from __future__ import annotations

from slstatus.util import fmt_human, read_text, read_uint

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused: str | None = None, path: str = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU, in Hz with a decimal prefix."""
    freq = read_uint(path)  # in kHz
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


class CpuUsage:
    """CPU usage in percent since the previous call."""

    def __init__(self, path: str = PROC_STAT) -> None:
        self.path = path
        self._previous: list[float] = [0.0] * _FIELDS

    def _sample(self) -> list[float] | None:
        text = read_text(self.path)
        if text is None:
            return None
        values = []
        for token in text.split()[1 : 1 + _FIELDS]:
            try:
                values.append(float(token))
            except ValueError:
                break
        return values if len(values) == _FIELDS else None

    def __call__(self, unused: str | None = None) -> str | None:
        current = self._sample()
        if current is None:
            return None
        previous, self._previous = self._previous, current

        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_cpu_usage = CpuUsage()


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _cpu_usage(unused)