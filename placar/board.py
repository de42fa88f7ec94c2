"""Scoreboard state and its 28-byte display frame."""

from __future__ import annotations

import time
from typing import Callable

DIGITS = bytes((0xB0, 0x31, 0x32, 0xB3, 0x34, 0xB5, 0xB6, 0x37, 0x38, 0xB9))
BLANK = 0xBF
ALARM_ON = 0xB3
ALARM_OFF = 0xBA
PERIOD_EXTRA_TIME = 0x45
PERIOD_PENALTIES = 0xD0

FRAME_SIZE = 28
CRC_SPAN = FRAME_SIZE - 4

_INITIAL_FRAME = bytes((
    0x02, 0x92, 0xBF, 0xB0, 0xB0, 0x31, 0xBF, 0xB0, 0xB0, 0xBF,
    0xB0, 0xB0, 0xB0, 0xB0, 0xB0, 0xBF, 0xB0, 0xB0, 0xB0, 0x32,
    0x34, 0x32, 0xB0, 0x83, 0x26, 0x02, 0x21, 0x23,
))

# Field positions inside the frame.
_TEAM_A = slice(2, 5)
_PERIOD = 5
_TEAM_B = slice(6, 9)
_SET_FOULS_A = slice(9, 11)
_TIMER = slice(11, 15)
_SET_FOULS_B = slice(15, 17)
_TIMEOUT_A = 17
_TIMEOUT_B = 18
_ALARM = 21
_SERVICE = 22
_CRC = 24

_MAX_GOALS = 200
_MAX_SET_FOULS = 21
_MAX_TIMEOUTS = 3
_LAST_REGULAR_PERIOD = 5
_MILLIS_WRAP = 1 << 32


def crc8(data: bytes, poly: int = 0x01, init: int = 0x80) -> int:
    """Return the MSB-first CRC-8 of ``data``."""
    crc = init & 0xFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = ((crc << 1) ^ poly) & 0xFF if crc & 0x80 else (crc << 1) & 0xFF
    return crc


def _default_clock() -> int:
    return int(time.monotonic() * 1000)


def _three_digits(value: int) -> bytes:
    hundreds = value // 100
    return bytes((
        BLANK if hundreds == 0 else DIGITS[hundreds],
        DIGITS[(value % 100) // 10],
        DIGITS[value % 10],
    ))


def _two_digits(value: int) -> bytes:
    tens = value // 10
    return bytes((BLANK if tens == 0 else DIGITS[tens], DIGITS[value % 10]))


class Scoreboard:
    """Scores, fouls, timer and period of a match, kept as a display frame."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _default_clock
        self._frame = bytearray(_INITIAL_FRAME)
        self.goals_a = 0
        self.goals_b = 0
        self.set_fouls_a = 0
        self.set_fouls_b = 0
        # Timeout counters survive a reset; only their displayed digit is cleared.
        self._timeouts_a = 0
        self._timeouts_b = 0
        self.timer_running = False
        self._last_tick_ms = 0
        self.timer_seconds = 0
        self.alarm_on = False
        self.period = 1
        self.extra_time = False
        self.penalties = False

    def increment_goals_a(self) -> None:
        self.goals_a = (self.goals_a + 1) % _MAX_GOALS
        self._frame[_TEAM_A] = _three_digits(self.goals_a)

    def decrement_goals_a(self) -> None:
        self.goals_a = max(self.goals_a - 1, 0)
        self._frame[_TEAM_A] = _three_digits(self.goals_a)

    def increment_goals_b(self) -> None:
        self.goals_b = (self.goals_b + 1) % _MAX_GOALS
        self._frame[_TEAM_B] = _three_digits(self.goals_b)

    def decrement_goals_b(self) -> None:
        self.goals_b = max(self.goals_b - 1, 0)
        self._frame[_TEAM_B] = _three_digits(self.goals_b)

    def increment_set_fouls_a(self) -> None:
        self.set_fouls_a = (self.set_fouls_a + 1) % _MAX_SET_FOULS
        self._frame[_SET_FOULS_A] = _two_digits(self.set_fouls_a)

    def increment_set_fouls_b(self) -> None:
        self.set_fouls_b = (self.set_fouls_b + 1) % _MAX_SET_FOULS
        self._frame[_SET_FOULS_B] = _two_digits(self.set_fouls_b)

    def increment_timeout_a(self) -> None:
        self._timeouts_a = (self._timeouts_a + 1) % _MAX_TIMEOUTS
        self._frame[_TIMEOUT_A] = DIGITS[self._timeouts_a]

    def increment_timeout_b(self) -> None:
        self._timeouts_b = (self._timeouts_b + 1) % _MAX_TIMEOUTS
        self._frame[_TIMEOUT_B] = DIGITS[self._timeouts_b]

    def toggle_service_a(self) -> None:
        current = self._frame[_SERVICE]
        self._frame[_SERVICE] = DIGITS[0] if current == DIGITS[1] else DIGITS[1]

    def toggle_service_b(self) -> None:
        current = self._frame[_SERVICE]
        self._frame[_SERVICE] = DIGITS[0] if current == DIGITS[2] else DIGITS[2]

    def toggle_timer(self) -> None:
        self.timer_running = not self.timer_running
        self._last_tick_ms = self._clock()

    def update_timer(self) -> None:
        """Advance the timer by every whole second elapsed since the last tick."""
        if not self.timer_running:
            return
        delta = (self._clock() - self._last_tick_ms) % _MILLIS_WRAP
        if delta < 1000:
            return
        seconds = delta // 1000
        self.timer_seconds += seconds
        self._last_tick_ms += seconds * 1000
        minutes, secs = divmod(self.timer_seconds, 60)
        self._frame[_TIMER] = bytes((
            DIGITS[(minutes // 10) % 10],
            DIGITS[minutes % 10],
            DIGITS[secs // 10],
            DIGITS[secs % 10],
        ))

    def reset(self) -> None:
        self.goals_a = 0
        self.goals_b = 0
        self.timer_seconds = 0
        self.timer_running = False
        self.set_fouls_a = 0
        self.set_fouls_b = 0
        self._frame[_SET_FOULS_A] = bytes((BLANK, DIGITS[0]))
        self._frame[_SET_FOULS_B] = bytes((BLANK, DIGITS[0]))
        self._frame[_TIMEOUT_A] = DIGITS[0]
        self._frame[_TIMEOUT_B] = DIGITS[0]
        self._frame[_SERVICE] = DIGITS[0]
        self._frame[_TEAM_A] = bytes((BLANK, DIGITS[0], DIGITS[0]))
        self._frame[_TEAM_B] = bytes((BLANK, DIGITS[0], DIGITS[0]))
        self._frame[_TIMER] = bytes((DIGITS[0],) * 4)
        self.alarm_on = False
        self._frame[_ALARM] = ALARM_OFF
        self.period = 1
        self._frame[_PERIOD] = DIGITS[1]

    def toggle_alarm(self) -> None:
        self.alarm_on = not self.alarm_on
        self._frame[_ALARM] = ALARM_ON if self.alarm_on else ALARM_OFF

    def advance_period(self) -> None:
        """Step through periods 1-5, then extra time, then penalties, then back to 1."""
        if self.penalties:
            self.period = 1
            self.extra_time = False
            self.penalties = False
            self._frame[_PERIOD] = DIGITS[1]
        elif self.extra_time:
            self.penalties = True
            self._frame[_PERIOD] = PERIOD_PENALTIES
        elif self.period >= _LAST_REGULAR_PERIOD:
            self.extra_time = True
            self._frame[_PERIOD] = PERIOD_EXTRA_TIME
        else:
            self.period += 1
            self._frame[_PERIOD] = DIGITS[self.period]

    def compute_crc(self) -> int:
        """Store and return the checksum over the frame's leading bytes."""
        value = crc8(self._frame[:CRC_SPAN], 0x01, 0x80)
        self._frame[_CRC] = value
        return value

    def to_bytes(self) -> bytes:
        return bytes(self._frame)

    def __len__(self) -> int:
        return len(self._frame)