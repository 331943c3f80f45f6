"""Plain-text rendering of steps and traces for terminal output."""
from __future__ import annotations

from collections.abc import Sequence

from schedule_trace.domain.step import Step
from schedule_trace.domain.types import Instruction, NodeId, NodeState

_STATE_GLYPHS = {
    NodeState.UNVISITED: ".",
    NodeState.IN_QUEUE: "Q",
    NodeState.COMPLETED: "#",
}


def format_step(step: Step, count: int) -> str:
    """Format one Step as a small data-structure panel."""
    indices = " ".join(f"{i:>3}" for i in range(count))
    degrees = " ".join(f"{d:>3}" for d in step.in_degree)
    states = " ".join(f"{_STATE_GLYPHS[step.node_states[i]]:>3}" for i in range(count))
    queue = " ".join(str(n) for n in step.queue) if step.queue else "(empty)"
    edge = step.highlighted_edge
    lines = [
        f"[{step.sequence_id:>4}] {step.instruction.name:<13} {step.description}",
        f"  node:      {indices}",
        f"  in-degree: {degrees}",
        f"  state:     {states}",
        f"  queue:     front -> {queue} <- back",
        f"  learned:   {step.learn_count}/{count}",
    ]
    if edge is not None:
        lines.append(f"  edge:      {edge.source} -> {edge.target}")
    return "\n".join(lines)


def dequeue_order(trace: Sequence[Step]) -> list[NodeId]:
    """Nodes in the order they were taken off the queue."""
    return [
        int(step.binding("course"))
        for step in trace
        if step.instruction is Instruction.DEQUEUE
    ]


def stuck_nodes(trace: Sequence[Step]) -> list[NodeId]:
    """Nodes still unvisited at the end of the trace (blocked by a cycle)."""
    final = trace[-1]
    return sorted(n for n, s in final.node_states.items() if s is NodeState.UNVISITED)


def format_summary(trace: Sequence[Step], count: int) -> str:
    """Verdict, size and ordering of a whole trace."""
    final = trace[-1]
    finished = final.learn_count == count
    order = dequeue_order(trace)
    lines = [
        f"Courses:        {count}",
        f"Steps:          {len(trace)}",
        f"Learned:        {final.learn_count}/{count}",
        f"Can finish:     {'yes' if finished else 'no'}",
        f"Learn order:    {' '.join(map(str, order)) if order else '(none)'}",
    ]
    if not finished:
        lines.append(f"Blocked:        {' '.join(map(str, stuck_nodes(trace)))}")
    return "\n".join(lines)
