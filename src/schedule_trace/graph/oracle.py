"""Reference oracle: Kahn's algorithm without any tracing.

This is the plain version of the reduction the trace generator performs
step by step.  It exists so the generator's terminal verdict can be
cross-checked against an implementation that shares none of the
snapshot machinery.

The algorithm:
  1.  Compute in-degree for every node.
  2.  Seed a queue with every node whose in-degree is 0, scanning ids
      in ascending order.
  3.  Pop a node, count it, decrement the in-degree of each successor.
      Any successor whose in-degree drops to 0 enters the queue.
  4.  The schedule can be finished iff every node was popped.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from schedule_trace.domain.types import NodeId
from schedule_trace.graph.adjacency import normalize


def compute_initial_in_degree(count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Number of incoming edges per node, counting duplicates."""
    in_deg = [0] * count
    for _, dst in edges:
        in_deg[dst] += 1
    return in_deg


def learn_order(count: int, edges: Iterable[Sequence[int]]) -> list[NodeId]:
    """Nodes in the order Kahn's algorithm completes them.

    Nodes on or downstream of a cycle never appear, so the result is
    shorter than *count* exactly when the schedule is impossible.
    """
    graph = normalize(count, edges)
    in_deg = graph.in_degrees()

    q: deque[NodeId] = deque(n for n in graph.nodes() if in_deg[n] == 0)

    order: list[NodeId] = []
    while q:
        node = q.popleft()
        order.append(node)
        for succ in graph.successors(node):
            in_deg[succ] -= 1
            if in_deg[succ] == 0:
                q.append(succ)
    return order


def can_finish(count: int, edges: Iterable[Sequence[int]]) -> bool:
    """True if every course can be completed (no cycle blocks any node)."""
    return len(learn_order(count, edges)) == count
