"""Cycle detection on a prerequisite graph using DFS three-color marking.

The three colors:
  WHITE  -- node not yet visited
  GRAY   -- node is on the current DFS path (ancestors of current node)
  BLACK  -- node fully explored (all descendants visited)

A back edge (an edge to a GRAY node) means the graph has a cycle.
Kahn's algorithm only tells you *that* some courses are stuck; this
module recovers one concrete loop so the failure can be explained.

The walk is iterative: course graphs are small, but a long
prerequisite chain should not hit the recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass

from schedule_trace.domain.types import NodeId
from schedule_trace.graph.adjacency import PrerequisiteGraph

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult:
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[NodeId] | None = None


def detect_cycle(graph: PrerequisiteGraph) -> CycleResult:
    """Detect whether *graph* contains a directed cycle.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is a directed edge.  Roots are tried in ascending
    id order and successors in registration order, so the reported
    cycle is deterministic.
    """
    color = [WHITE] * graph.node_count

    for root in graph.nodes():
        if color[root] != WHITE:
            continue
        path: list[NodeId] = [root]
        pending = [iter(graph.successors(root))]
        color[root] = GRAY
        while pending:
            succ = next(pending[-1], None)
            if succ is None:
                color[path.pop()] = BLACK
                pending.pop()
                continue
            if color[succ] == GRAY:
                # back edge -> the loop is the path suffix starting at succ
                start = path.index(succ)
                return CycleResult(has_cycle=True, cycle_path=path[start:] + [succ])
            if color[succ] == WHITE:
                color[succ] = GRAY
                path.append(succ)
                pending.append(iter(graph.successors(succ)))

    return CycleResult(has_cycle=False, cycle_path=None)
