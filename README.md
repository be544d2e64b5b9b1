# barstat

`barstat` builds a single status line from a set of small system probes
(date and time, CPU usage, memory, battery, temperature, volume and more)
and publishes it at a fixed interval, either as the name of the X root
window (where many window managers pick it up as their status bar text) or
on standard output.

## Installation

```
pip install .
```

It needs Python 3.10 or later on Linux and depends on `psutil`.

## Usage

```
barstat          # set the X root window name every interval
barstat -s       # print one status line per interval to standard output
```

The interval is 1000 ms (`barstat.config.INTERVAL`). The program stops
cleanly on `SIGINT` or `SIGTERM`.

Without `-s`, `barstat` connects to the X server named by `$DISPLAY`
(local socket or TCP), authenticating with an `MIT-MAGIC-COOKIE-1` entry from
`$XAUTHORITY` or `~/.Xauthority` when one matches. If the connection fails it
prints `XOpenDisplay: Failed to open display` and exits with status 1. On
exit it clears the root window name.

Any option other than `-s`, or any extra argument, prints
`usage: barstat [-s]` and exits with status 1. The command can also be
started as `python -m barstat.status`.

## What is shown

`barstat.config.ARGS` is the tuple of `Arg` entries that make up the line.
Each `Arg` pairs a probe function with a `%`-style format string and an
optional argument; `Arg.value()` runs the probe. A probe that cannot read
its value is shown as `n/a` (`UNKNOWN_STR`), and the whole line is kept under
`MAXLEN` (2048) bytes. The default line shows:

- the date and time (`datetime("%a %F %T")`)
- CPU usage (`cpu_perc`)
- the temperature of `thermal_zone0` (`temp`)
- memory used and memory percentage (`ram_used`, `ram_perc`)
- backlight level (`run_command("xbacklight -get")`)
- battery percentage and state for `BAT0` (`battery_perc`, `battery_state`)
- volume from `/dev/mixer` (`vol_perc`)
- microphone state through `amixer` (`run_command(MIC)`)

`barstat.config.COMPONENTS` maps every probe's name to its function.

## Probes

Every probe returns a string, or `None` when the value is not available
(usually after writing a warning to standard error):

| Module | Functions |
| --- | --- |
| `barstat.battery` | `battery_perc`, `battery_state`, `battery_remaining` |
| `barstat.cpu` | `cpu_freq`, `cpu_perc` (and the `CpuUsage` sampler) |
| `barstat.datetime_info` | `datetime` |
| `barstat.disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` |
| `barstat.system` | `entropy`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `username`, `uid` |
| `barstat.files` | `num_files`, `run_command` |
| `barstat.ip` | `ipv4`, `ipv6` |
| `barstat.netspeeds` | `netspeed_rx`, `netspeed_tx` (and the `ByteRate` counter) |
| `barstat.ram` | `ram_free`, `ram_perc`, `ram_total`, `ram_used` |
| `barstat.swap` | `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstat.temperature` | `temp` |
| `barstat.volume` | `vol_perc` (OSS mixer device) |
| `barstat.wifi` | `wifi_perc`, `wifi_essid` |

`cpu_perc`, `netspeed_rx` and `netspeed_tx` compare against the previous
call, so they return `None` the first time.

Sizes are formatted by `barstat.util.fmt_human` with binary (`Ki`, `Mi`, …)
or decimal (`k`, `M`, …) prefixes; for example `fmt_human(2048, 1024)` gives
`"2.0 Ki"`.

To build a line from your own entries, use
`barstat.status.render_status(args, unknown, maxlen)`:

```python
from barstat.config import Arg
from barstat.status import render_status
from barstat.system import hostname, load_avg

line = render_status(
    [Arg(hostname, "%s | "), Arg(load_avg, "load %s")],
    "n/a",
    2048,
)
print(line)
```

## Limitations

- There is no keyboard layout or caps/num lock indicator probe.
- The line layout is not read from a configuration file; the `barstat`
  command always uses `barstat.config.ARGS`.
- Probes read Linux interfaces (`/proc`, `/sys`, OSS and wireless ioctls);
  other systems are not supported.

## Running the tests

```
pip install .[test]
pytest
```