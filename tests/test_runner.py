import io

import pytest

from placar.board import Scoreboard, crc8
from placar.controller import BoardController
from placar.runner import main, run, tick


def make(notifier=None):
    board = Scoreboard(clock=lambda: 0)
    return board, BoardController(board, notifier, lambda _s: None)


def test_tick_writes_frame_with_valid_crc():
    board, controller = make()
    stream = io.BytesIO()
    frame = tick(board, controller, stream)
    assert stream.getvalue() == frame
    assert len(frame) == 28
    assert frame[24] == crc8(frame[:24])


def test_tick_notifies_connected_client():
    sent = []
    board, controller = make(sent.append)
    controller.on_connect()
    frame = tick(board, controller, io.BytesIO())
    assert sent == [frame]


def test_run_counts_and_sleeps():
    board, controller = make()
    stream = io.BytesIO()
    sleeps = []
    done = run(board, controller, stream, 3, sleeps.append)
    assert done == 3
    assert len(stream.getvalue()) == 3 * len(board)
    assert sleeps == [0.003] * 3


def test_main_writes_frames(tmp_path):
    out = tmp_path / "frames.bin"
    assert main(["--count", "2", "--output", str(out)]) == 0
    data = out.read_bytes()
    assert len(data) == 56
    assert data[:28] == data[28:]


def test_main_applies_commands(tmp_path):
    out = tmp_path / "frames.bin"
    assert main(["--count", "1", "--output", str(out), "--command", "goal_a_up",
                 "--command", "0x0c"]) == 0
    data = out.read_bytes()
    assert data[2:5] == bytes((0xBF, 0xB0, 0x31))
    assert data[21] == 0xB3


def test_main_rejects_unknown_command(tmp_path):
    with pytest.raises(SystemExit):
        main(["--count", "1", "--output", str(tmp_path / "x.bin"), "--command", "bogus"])