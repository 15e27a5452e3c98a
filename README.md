# slstatus

A small status line generator. At a fixed interval it collects a handful of
system values (CPU usage, memory, uptime, network speed, battery, date and
time and more), formats them into one line and either sets it as the name of
the X root window (where window managers such as dwm read their status text)
or prints it to standard output.

## Installation

```
pip install .
```

The only runtime dependency is `psutil`, used to look up interface
addresses.

## Usage

```
slstatus [-v] [-s] [-1]
```

- Without options the status line is written to the name of the root window
  of the X display named by `DISPLAY`, once per interval. The connection is
  made directly over the X11 socket, using `XAUTHORITY` (or `~/.Xauthority`)
  for credentials. If no display can be opened it exits with status 1. On
  exit the root window name is cleared.
- `-s` writes the status line to standard output on every update instead.
- `-1` writes the status line once to standard output and exits.
- `-v` prints `slstatus-1.0` to standard error and exits with status 1.

Options may be combined (`-s1`), and `--` ends the options. Any other
option or argument prints a usage message and exits with status 1.

`SIGINT` and `SIGTERM` stop it after the current update; `SIGUSR1` forces an
immediate update.

## Components

Every component is a function in a module of `slstatus.components` that
takes one argument and returns a string, or `None` when no value can be
retrieved (the unknown text, `n/a`, is shown in its place):

| Component | Module | Argument |
|---|---|---|
| `battery_perc`, `battery_state`, `battery_remaining` | `battery` | battery name (`BAT0`) |
| `cat` | `cat` | file path |
| `cpu_freq`, `cpu_perc` | `cpu` | unused |
| `datetime` | `clock` | `strftime` format (`%F %T`) |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | `disk` | mount point (`/`) |
| `entropy` | `entropy` | unused |
| `hostname`, `kernel_release`, `load_avg` | `hostinfo` | unused |
| `ipv4`, `ipv6` | `ip` | interface name (`eth0`) |
| `netspeed_rx`, `netspeed_tx` | `netspeeds` | interface name (`wlan0`) |
| `num_files` | `num_files` | directory path |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | `ram` | unused |
| `run_command` | `run_command` | shell command (`echo foo`) |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | `swap` | unused |
| `temp` | `temperature` | sensor file (`/sys/class/thermal/...`) |
| `uptime` | `uptime` | unused |
| `gid`, `uid`, `username` | `user` | unused |
| `vol_perc` | `volume` | OSS mixer device (`/dev/mixer`) |
| `wifi_essid`, `wifi_perc` | `wifi` | interface name (`wlan0`) |

Notes on some of them:

- `battery_state` returns `+` (charging), `-` (discharging), `o` (full or not
  charging) or `?`; `battery_remaining` returns `Hh Mm` while discharging and
  an empty string otherwise.
- `cpu_perc` and `netspeed_rx`/`netspeed_tx` compare with the previous call,
  so the first call returns `None`. `CpuUsage` and `NetSpeedMeter` give
  independent meters with their own state.
- Functions reading `/proc` or `/sys` accept a `path` or `root` keyword so
  they can be pointed at other files.

Sizes are shown in human-readable form by `slstatus.util.fmt_human`, which
scales by 1000 or 1024 and appends the unit prefix, for example
`fmt_human(1536, 1024)` gives `"1.5 Ki"`. Any other base raises
`ValueError`.

## Configuration

`slstatus.config` holds the update interval (`INTERVAL`, in milliseconds),
the unknown text (`UNKNOWN_STR`), the maximum line length in bytes
(`MAXLEN`) and the status line itself, `ARGS`: a tuple of `Arg` entries, each
naming a component function (`func`), a format (`fmt`) and the component's
argument (`args`). `COMPONENTS` maps every component name to its function.

The format may contain one `%s`, replaced by the component's value, and
`%%` for a literal percent sign. `slstatus.cli.render_status(entries,
unknown)` builds one line from a sequence of entries; a line longer than
`MAXLEN` is cut off with a warning.

## Limitations

- The status line is not read from a configuration file; to change it, edit
  `ARGS` in `slstatus.config`.
- There are no components for keyboard lock indicators or the current
  keyboard layout.
- Battery, CPU, memory, swap, entropy, temperature, network speed and WiFi
  values are read from Linux `/proc` and `/sys` files; on other systems
  these components return `None`. Volume is read from an OSS mixer only.