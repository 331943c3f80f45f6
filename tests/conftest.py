"""Shared fixtures for graph and trace tests."""
from __future__ import annotations

import pytest

from schedule_trace.graph.trace_generator import Trace, generate_trace

SEED = 42

# count=4: 1 and 2 need 0, 3 needs 1 and 2
WORKED_COUNT = 4
WORKED_EDGES = [(1, 0), (2, 0), (3, 1), (3, 2)]

CYCLE_COUNT = 2
CYCLE_EDGES = [(0, 1), (1, 0)]


@pytest.fixture
def worked_trace() -> Trace:
    return generate_trace(WORKED_COUNT, WORKED_EDGES)


@pytest.fixture
def cycle_trace() -> Trace:
    return generate_trace(CYCLE_COUNT, CYCLE_EDGES)


@pytest.fixture
def chain_edges() -> list[tuple[int, int]]:
    """0 -> 1 -> 2 -> 3"""
    return [(0, 1), (1, 2), (2, 3)]


@pytest.fixture
def diamond_edges() -> list[tuple[int, int]]:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return [(0, 1), (0, 2), (1, 3), (2, 3)]
