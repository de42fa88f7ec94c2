"""Command handling and connection state for a remote scoreboard client."""

from __future__ import annotations

import enum
import time
from typing import Callable

from placar.board import Scoreboard


class Command(enum.IntEnum):
    """One-byte commands a client writes to the scoreboard."""

    GOAL_A_UP = 0x01
    GOAL_A_DOWN = 0x02
    GOAL_B_UP = 0x03
    TIMEOUT_A = 0x04
    SERVICE_A = 0x05
    SET_FOULS_A = 0x06
    SET_FOULS_B = 0x07
    SERVICE_B = 0x08
    TIMEOUT_B = 0x09
    GOAL_B_DOWN = 0x0A
    TIMER = 0x0B
    ALARM = 0x0C
    RESET = 0x0D
    PERIOD = 0x0E


_ACTIONS: dict[Command, Callable[[Scoreboard], None]] = {
    Command.GOAL_A_UP: Scoreboard.increment_goals_a,
    Command.GOAL_A_DOWN: Scoreboard.decrement_goals_a,
    Command.GOAL_B_UP: Scoreboard.increment_goals_b,
    Command.TIMEOUT_A: Scoreboard.increment_timeout_a,
    Command.SERVICE_A: Scoreboard.toggle_service_a,
    Command.SET_FOULS_A: Scoreboard.increment_set_fouls_a,
    Command.SET_FOULS_B: Scoreboard.increment_set_fouls_b,
    Command.SERVICE_B: Scoreboard.toggle_service_b,
    Command.TIMEOUT_B: Scoreboard.increment_timeout_b,
    Command.GOAL_B_DOWN: Scoreboard.decrement_goals_b,
    Command.TIMER: Scoreboard.toggle_timer,
    Command.ALARM: Scoreboard.toggle_alarm,
    Command.RESET: Scoreboard.reset,
    Command.PERIOD: Scoreboard.advance_period,
}


class BoardController:
    """Applies client commands to a board and pushes frames while connected."""

    def __init__(
        self,
        board: Scoreboard,
        notifier: Callable[[bytes], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.board = board
        self._notifier = notifier
        self._sleep = sleep
        self._connected = False

    def handle_write(self, value: bytes) -> Command | None:
        """Run the command in the first byte; empty or unknown writes are ignored."""
        if not value:
            return None
        try:
            command = Command(value[0])
        except ValueError:
            return None
        _ACTIONS[command](self.board)
        return command

    def on_connect(self) -> None:
        """Mark connected and flash the alarm for one second."""
        self._connected = True
        self.board.toggle_alarm()
        self._sleep(1.0)
        self.board.toggle_alarm()

    def on_disconnect(self) -> None:
        self._connected = False

    def notify_if_connected(self) -> bool:
        """Send the current frame to the client when one is connected."""
        if not self._connected:
            return False
        if self._notifier is not None:
            self._notifier(self.board.to_bytes())
        return True

    def is_connected(self) -> bool:
        return self._connected