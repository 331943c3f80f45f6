"""Node lifecycle state machine.

    UNVISITED → IN_QUEUE → COMPLETED

A node reaches IN_QUEUE when its in-degree hits zero (seed scan or
relaxation) and COMPLETED when it is dequeued.  A node that never
leaves UNVISITED sits on, or downstream of, a cycle.
"""
from __future__ import annotations

from schedule_trace.domain.types import NodeId, NodeState


class InvalidTransition(Exception):
    """Raised when a node state transition is not allowed."""


VALID_TRANSITIONS: dict[NodeState, set[NodeState]] = {
    NodeState.UNVISITED: {NodeState.IN_QUEUE},
    NodeState.IN_QUEUE: {NodeState.COMPLETED},
    NodeState.COMPLETED: set(),
}


def transition(states: dict[NodeId, NodeState], node: NodeId, target: NodeState) -> None:
    """Move *node* to *target* in place, enforcing VALID_TRANSITIONS."""
    current = states[node]
    if target not in VALID_TRANSITIONS[current]:
        raise InvalidTransition(
            f"Node {node}: cannot transition from {current.name} to {target.name}"
        )
    states[node] = target


def is_forward(before: NodeState, after: NodeState) -> bool:
    """True if *after* equals *before* or is one valid transition away.

    Two consecutive snapshots may differ by at most one move, so
    UNVISITED -> COMPLETED (skipping IN_QUEUE) is not forward.
    """
    return after is before or after in VALID_TRANSITIONS[before]
