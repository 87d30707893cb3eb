# brewcontrol

Building blocks for a fermentation temperature controller. The package has no
third-party dependencies.

## Modules

- `brewcontrol.filters`: fixed-point IIR low-pass filters working on
  integers. `FixedFilter` is one second-order section (`b_value` sets its
  strength, with `a = 2 * b + 4`). `CascadedFilter` chains three sections.
  Both offer `init`, `add`, `add_precise`, `read_input`, `read_output`,
  `read_output_precise`, `read_prev_output_precise`, `detect_pos_peak` and
  `detect_neg_peak`. Precise values carry 16 extra fraction bits. The peak
  detectors return `None` when the last output was not a peak.
- `brewcontrol.mintimes`: `MinTimes` holds minimum on/off, switching and
  peak-detection times in seconds. Presets are chosen with
  `set_defaults(MinTimesChoice.DEFAULT | LOW_DELAY | CUSTOM | DEVELOP)`.
  `to_json()` and `from_json(doc)` convert to and from a dict. `save()` and
  `load()` use an optional `JsonFileStore`. `load()` returns `False` when there
  is no store or it cannot be read. Choosing `CUSTOM` loads from the store.
- `brewcontrol.actuators`: `ValueActuator` only remembers its state, through
  its `active` property.
- `brewcontrol.looptimer`: `LoopTimer(interval, clock=millis)` has
  `has_expired()`, `reset()`, `time_passed` and `loop_counter`. `millis()`
  gives milliseconds since the module was loaded.
- `brewcontrol.jsonstore`: `JsonFileStore(path)` has `save(doc)` and `load()`.
  Failures raise `JsonStoreError`.
- `brewcontrol.applog`: `Logger` has the levels of `LogLevel`. Its methods are
  `fatal`, `error`, `warning`, `notice`, `info`, `trace` and `verbose`, plus an
  `...ln` variant of each that appends a newline. It also has a `prefix` and a
  `suffix` hook. `format_message(fmt, *args)` expands `%s %d %x %X %b %B %c %C
  %t %T %F` and related wildcards. A shared instance is `applog.log`.
- `brewcontrol.serialdebug`: `SerialDebug` attaches a logger to a stream at
  level INFO, with `print_timestamp` as the line prefix. `ErrorLog(root)`
  appends lines of at most 79 characters to `error.log`. When that file grows
  past 2048 bytes it is rotated into `error2.log`. `dump_primary()` and
  `dump_secondary()` copy a log to the console and delete it.
- `brewcontrol.numberformats`: `parse_bytes(text)` and `print_bytes(data)`
  convert between bytes and upper-case hex text.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from brewcontrol.filters import CascadedFilter
from brewcontrol.mintimes import MinTimes, MinTimesChoice
from brewcontrol.numberformats import parse_bytes, print_bytes

f = CascadedFilter(2)
f.init(20 * 512)
for reading in (20 * 512, 21 * 512, 21 * 512):
    smoothed = f.add(reading)

times = MinTimes()
times.set_defaults(MinTimesChoice.LOW_DELAY)
print(times.to_json())

address = parse_bytes("0011223344556677")
assert print_bytes(address) == "0011223344556677"
```

## What it does not do

This is a library of parts. It has no command to run and no temperature
control loop. It does not read temperature sensors and does not drive
heating or cooling hardware. `ValueActuator` only holds a state.