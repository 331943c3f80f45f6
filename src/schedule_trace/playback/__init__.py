"""Playback over generated traces."""

from schedule_trace.playback.cursor import TraceCursor

__all__ = ["TraceCursor"]
