import pytest

from placar.board import Scoreboard
from placar.controller import BoardController, Command


def make(notifier=None):
    sleeps = []
    board = Scoreboard(clock=lambda: 0)
    controller = BoardController(board, notifier, sleeps.append)
    return board, controller, sleeps


def test_goal_command_updates_board():
    board, controller, _ = make()
    result = controller.handle_write(bytes([0x01]))
    assert result is Command.GOAL_A_UP
    assert board.goals_a == 1


def test_only_first_byte_counts():
    board, controller, _ = make()
    controller.handle_write(bytes([0x03, 0x01, 0x01]))
    assert board.goals_b == 1
    assert board.goals_a == 0


def test_empty_write_ignored():
    board, controller, _ = make()
    before = board.to_bytes()
    assert controller.handle_write(b"") is None
    assert board.to_bytes() == before


def test_unknown_command_ignored():
    board, controller, _ = make()
    before = board.to_bytes()
    assert controller.handle_write(bytes([0x7F])) is None
    assert board.to_bytes() == before


@pytest.mark.parametrize("code,attr", [
    (0x06, "set_fouls_a"),
    (0x07, "set_fouls_b"),
])
def test_set_fouls_commands(code, attr):
    board, controller, _ = make()
    controller.handle_write(bytes([code]))
    assert getattr(board, attr) == 1


def test_reset_command():
    board, controller, _ = make()
    controller.handle_write(bytes([0x01]))
    controller.handle_write(bytes([0x0E]))
    controller.handle_write(bytes([0x0D]))
    assert board.goals_a == 0
    assert board.period == 1


def test_timer_and_alarm_commands():
    board, controller, _ = make()
    controller.handle_write(bytes([Command.TIMER]))
    controller.handle_write(bytes([Command.ALARM]))
    assert board.timer_running
    assert board.alarm_on
    assert board.to_bytes()[21] == 0xB3


def test_connect_flashes_alarm_and_sleeps():
    board, controller, sleeps = make()
    controller.on_connect()
    assert controller.is_connected()
    assert sleeps == [1.0]
    assert board.alarm_on is False
    assert board.to_bytes()[21] == 0xBA


def test_disconnect_clears_state():
    _, controller, _ = make()
    controller.on_connect()
    controller.on_disconnect()
    assert controller.is_connected() is False


def test_notify_only_when_connected():
    sent = []
    board, controller, _ = make(sent.append)
    assert controller.notify_if_connected() is False
    assert sent == []
    controller.on_connect()
    assert controller.notify_if_connected() is True
    assert sent == [board.to_bytes()]