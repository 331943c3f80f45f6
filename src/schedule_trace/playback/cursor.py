"""Read-only cursor over a trace for step-by-step playback.

The cursor only tracks a position and a playing flag.  It never touches
the Steps themselves, and it owns no timer: a UI calls ``tick()`` at
whatever pace it likes while ``playing`` is set.

Every move is clamped to ``[0, len(trace) - 1]``, so callers can bind
"previous"/"next" keys without bounds checks of their own.
"""
from __future__ import annotations

from collections.abc import Sequence

from schedule_trace.domain.step import Step


class TraceCursor:
    """Position within a trace plus play/pause state.

    Args:
        trace: the Steps to walk.  Must not be empty (a generated trace
            always has at least the INIT, BEGIN_SCAN and TERMINAL steps).
    """

    __slots__ = ("_trace", "_index", "_playing")

    def __init__(self, trace: Sequence[Step]) -> None:
        if not trace:
            raise ValueError("Cannot play back an empty trace")
        self._trace = trace
        self._index = 0
        self._playing = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Step:
        return self._trace[self._index]

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def last_index(self) -> int:
        return len(self._trace) - 1

    @property
    def can_go_previous(self) -> bool:
        return self._index > 0

    @property
    def can_go_next(self) -> bool:
        return self._index < self.last_index

    @property
    def at_end(self) -> bool:
        return self._index == self.last_index

    # ---- navigation ------------------------------------------------------

    def seek(self, index: int) -> Step:
        """Jump to *index*, clamped into range."""
        self._index = max(0, min(self.last_index, index))
        return self.current

    def next(self) -> Step:
        return self.seek(self._index + 1)

    def previous(self) -> Step:
        return self.seek(self._index - 1)

    def reset(self) -> Step:
        """Stop playing and rewind to the first step."""
        self._playing = False
        return self.seek(0)

    # ---- play/pause ------------------------------------------------------

    def play(self) -> None:
        """Start playing; restarts from the beginning if already at the end."""
        if self.at_end:
            self._index = 0
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def toggle(self) -> None:
        if self._playing:
            self.pause()
        else:
            self.play()

    def tick(self) -> Step:
        """Advance one step while playing; stop once the end is reached."""
        if self._playing and self.can_go_next:
            self._index += 1
        if self.at_end:
            self._playing = False
        return self.current

    def __len__(self) -> int:
        return len(self._trace)

    def __repr__(self) -> str:
        state = "playing" if self._playing else "paused"
        return f"TraceCursor({self._index + 1}/{len(self._trace)}, {state})"
