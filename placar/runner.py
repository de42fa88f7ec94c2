"""Main loop: stream scoreboard frames and forward them to a connected client."""

from __future__ import annotations

import argparse
import sys
import time
from typing import BinaryIO, Callable, Sequence

from placar.board import Scoreboard
from placar.controller import BoardController, Command

LOOP_DELAY = 0.003


def tick(board: Scoreboard, controller: BoardController, stream: BinaryIO) -> bytes:
    """Advance the timer, refresh the checksum, write the frame and notify."""
    board.update_timer()
    board.compute_crc()
    frame = board.to_bytes()
    stream.write(frame)
    controller.notify_if_connected()
    return frame


def run(
    board: Scoreboard,
    controller: BoardController,
    stream: BinaryIO,
    count: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run ``count`` loop iterations, or forever when ``count`` is None."""
    done = 0
    while count is None or done < count:
        tick(board, controller, stream)
        stream.flush()
        sleep(LOOP_DELAY)
        done += 1
    return done


def _command(text: str) -> Command:
    try:
        return Command[text.upper()]
    except KeyError:
        pass
    try:
        return Command(int(text, 0))
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown command: {text}") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="placar", description="Stream scoreboard frames to a file or stdout."
    )
    parser.add_argument("--count", type=int, default=None,
                        help="number of frames to write (default: forever)")
    parser.add_argument("--output", default=None,
                        help="file to write frames to (default: stdout)")
    parser.add_argument("--command", type=_command, action="append", default=[],
                        help="command name or code to apply before streaming")
    args = parser.parse_args(argv)
    if args.count is not None and args.count < 0:
        parser.error("--count must not be negative")

    board = Scoreboard()
    controller = BoardController(board)
    for command in args.command:
        controller.handle_write(bytes([command]))

    try:
        if args.output is None:
            run(board, controller, sys.stdout.buffer, args.count)
        else:
            with open(args.output, "wb") as stream:
                run(board, controller, stream, args.count)
    except KeyboardInterrupt:
        return 130
    return 0