"""Tests for TraceCursor navigation and play/pause state."""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from schedule_trace.domain.types import Instruction
from schedule_trace.graph.trace_generator import generate_trace
from schedule_trace.playback.cursor import TraceCursor
from tests.conftest import WORKED_COUNT, WORKED_EDGES

TRACE = generate_trace(WORKED_COUNT, WORKED_EDGES)


class TestNavigation:
    def test_starts_at_first_step(self) -> None:
        cursor = TraceCursor(TRACE)
        assert cursor.index == 0
        assert cursor.current is TRACE[0]
        assert not cursor.can_go_previous
        assert cursor.can_go_next
        assert not cursor.playing

    def test_empty_trace_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            TraceCursor(())

    def test_next_and_previous(self) -> None:
        cursor = TraceCursor(TRACE)
        assert cursor.next() is TRACE[1]
        assert cursor.next() is TRACE[2]
        assert cursor.previous() is TRACE[1]
        assert cursor.index == 1

    def test_previous_at_start_stays(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.previous()
        assert cursor.index == 0

    def test_next_at_end_stays(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.seek(len(TRACE) - 1)
        cursor.next()
        assert cursor.index == len(TRACE) - 1
        assert cursor.at_end
        assert not cursor.can_go_next
        assert cursor.current.instruction is Instruction.TERMINAL

    @given(st.integers(min_value=-1000, max_value=1000))
    def test_seek_clamps(self, target: int) -> None:
        cursor = TraceCursor(TRACE)
        cursor.seek(target)
        assert 0 <= cursor.index < len(TRACE)
        if 0 <= target < len(TRACE):
            assert cursor.index == target

    def test_backward_navigation_sees_original_state(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.seek(6)
        before = cursor.current.to_dict()
        cursor.seek(len(TRACE) - 1)
        cursor.seek(6)
        assert cursor.current.to_dict() == before

    def test_single_step_trace(self) -> None:
        cursor = TraceCursor(TRACE[:1])
        assert cursor.at_end
        assert not cursor.can_go_next
        assert not cursor.can_go_previous


class TestPlayback:
    def test_toggle(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.toggle()
        assert cursor.playing
        cursor.toggle()
        assert not cursor.playing

    def test_tick_advances_only_while_playing(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.tick()
        assert cursor.index == 0
        cursor.play()
        cursor.tick()
        assert cursor.index == 1

    def test_tick_stops_at_end(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.play()
        for _ in range(len(TRACE) + 5):
            cursor.tick()
        assert cursor.at_end
        assert not cursor.playing

    def test_play_at_end_restarts(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.seek(len(TRACE) - 1)
        cursor.play()
        assert cursor.index == 0
        assert cursor.playing

    def test_reset(self) -> None:
        cursor = TraceCursor(TRACE)
        cursor.play()
        cursor.tick()
        cursor.reset()
        assert cursor.index == 0
        assert not cursor.playing

    def test_repr(self) -> None:
        cursor = TraceCursor(TRACE)
        assert repr(cursor) == f"TraceCursor(1/{len(TRACE)}, paused)"
