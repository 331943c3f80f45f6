"""Shared type aliases and enums used across the domain."""
from __future__ import annotations

from enum import Enum, auto
from typing import TypeAlias

NodeId: TypeAlias = int
Edge: TypeAlias = tuple[int, int]  # (from, to): from must complete before to


class NodeState(Enum):
    UNVISITED = "unvisited"
    IN_QUEUE = "in-queue"
    COMPLETED = "completed"


class Instruction(Enum):
    """Instruction-pointer tag carried by every Step.

    Display layers map these to lines of whatever listing they show.
    """
    INIT = auto()
    REGISTER_EDGE = auto()
    BEGIN_SCAN = auto()
    SEED_QUEUE = auto()
    DEQUEUE = auto()
    RELAX_EDGE = auto()
    ENQUEUE = auto()
    ADVANCE_COUNT = auto()
    TERMINAL = auto()
