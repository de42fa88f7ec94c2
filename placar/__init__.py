"""Scoreboard state, frame encoding, command handling and a frame-streaming loop."""

__version__ = "0.1.0"
__all__ = ["board", "controller", "runner"]