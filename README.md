# placar

A model of a sports scoreboard that drives its display through a fixed
28-byte serial frame. The package keeps the scoreboard state (goals, set and
foul counters, timeouts, service indicator, match timer, alarm and period).
It encodes that state into the frame the display understands and protects
the frame with a CRC-8 checksum.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The scoreboard

`placar.board.Scoreboard` holds the state and the encoded frame. It takes an
optional `clock`, a callable that returns the current time in milliseconds.
The match timer uses it to advance. By default it reads `time.monotonic()`.

```python
import time
from placar.board import Scoreboard

board = Scoreboard(clock=lambda: int(time.monotonic() * 1000))

board.increment_goals_a()
board.increment_goals_b()
board.increment_set_fouls_a()
board.toggle_service_a()
board.toggle_timer()

board.update_timer()      # call regularly; advances whole seconds
board.compute_crc()       # store and return the checksum byte
frame = board.to_bytes()  # 28 bytes, ready for the serial line
assert len(frame) == len(board)
```

Behaviour worth knowing:

- Goals count from 0 to 199 and wrap back to 0. Decrementing stops at 0.
- Set/foul counters count from 0 to 20 and wrap back to 0.
- Timeout counters cycle through 0, 1 and 2.
- The service indicator toggles between "none" and team A, or between "none"
  and team B.
- The timer shows minutes and seconds (`MM:SS`). `update_timer()` adds every
  whole second elapsed since the last tick, and only while the timer is
  running.
- `advance_period()` steps through periods 1 to 5, then extra time, then
  penalties, then back to 1.
- `toggle_alarm()` switches the alarm indicator on and off.
- `reset()` does the following:
  - sets goals, set/foul counters, timeout and service digits, the timer
    (`00:00`), the alarm and the period back to their starting display;
  - stops the timer.

  It does not clear the internal timeout counters or the extra-time and
  penalty state.

Public state is available as attributes:

- `goals_a`, `goals_b`
- `set_fouls_a`, `set_fouls_b`
- `timer_running`, `timer_seconds`
- `alarm_on`
- `period`, `extra_time`, `penalties`

`placar.board.crc8(data, poly=0x01, init=0x80)` computes the MSB-first CRC-8
the display uses. The scoreboard computes it over every byte of the frame but
the last four.

## The controller

`placar.controller.BoardController` turns one-byte commands from a remote
client into scoreboard actions, and tracks whether a client is connected.
The `Command` enumeration lists the command codes:

| Code   | `Command`     | Action                  |
|--------|---------------|-------------------------|
| `0x01` | `GOAL_A_UP`   | team A goal +1          |
| `0x02` | `GOAL_A_DOWN` | team A goal -1          |
| `0x03` | `GOAL_B_UP`   | team B goal +1          |
| `0x0a` | `GOAL_B_DOWN` | team B goal -1          |
| `0x04` | `TIMEOUT_A`   | team A timeout          |
| `0x09` | `TIMEOUT_B`   | team B timeout          |
| `0x05` | `SERVICE_A`   | toggle team A service   |
| `0x08` | `SERVICE_B`   | toggle team B service   |
| `0x06` | `SET_FOULS_A` | team A set/fouls +1     |
| `0x07` | `SET_FOULS_B` | team B set/fouls +1     |
| `0x0b` | `TIMER`       | start/stop the timer    |
| `0x0c` | `ALARM`       | toggle the alarm        |
| `0x0d` | `RESET`       | reset the scoreboard    |
| `0x0e` | `PERIOD`      | advance the period      |

`handle_write(value)` acts on the first byte only. It returns the `Command`
it ran, or `None` for an empty write or an unknown code.

```python
import time
from placar.controller import BoardController

sent = []
controller = BoardController(board, notifier=sent.append, sleep=time.sleep)

controller.on_connect()           # alarm on, sleep one second, alarm off
controller.handle_write(b"\x01")  # team A scores
controller.notify_if_connected()  # passes the current frame to the notifier
controller.is_connected()         # True
controller.on_disconnect()
```

`notify_if_connected()` returns `True` when a client is connected and `False`
otherwise. If no notifier is given, nothing is sent.

## The frame loop

`placar.runner.tick(board, controller, stream)` performs one pass of the
loop and returns the frame it wrote. A pass does four things:

1. advances the timer;
2. refreshes the checksum;
3. writes the frame to the binary `stream`;
4. notifies a connected client.

`placar.runner.run(board, controller, stream, count=None, sleep=time.sleep)`
repeats `tick`. After each pass it flushes the stream and sleeps 3 ms. It
returns the number of passes. With `count=None` it runs forever.

The `placar` command runs this loop, writing frames to standard output:

```
placar
placar --count 10 --output frames.bin
placar --command GOAL_A_UP --command 0x0e --count 1
```

- `--count N` writes `N` frames and stops. The default is to run until
  interrupted, which exits with status 130.
- `--output PATH` writes to a file instead of standard output.
- `--command` applies a command before streaming starts. It takes a
  `Command` name (case-insensitive) or a numeric code, and may be repeated.

## What it does not do

The package does not talk to any radio, Bluetooth stack or serial port. To
use `BoardController` with a real client, feed it the client's writes with
`handle_write`, and call `on_connect`/`on_disconnect` yourself. Pass a
`notifier` that delivers frames to the client. The `placar` command only
writes frames to a stream. It does not accept commands while it runs.