"""Step trace generator: Kahn's algorithm, one snapshot per mutation.

The generator runs the algorithm exactly once and records a Step at
every instant the working state changes.  Phases, in order:

  INIT           all nodes unvisited, in-degrees zero, queue empty
  REGISTER_EDGE  one per input edge, after its in-degree/adjacency update
  BEGIN_SCAN     start of queue seeding
  SEED_QUEUE     one per zero-in-degree node, scanning ids ascending
  PROCESS        per dequeued node: DEQUEUE, then RELAX_EDGE for each
                 outgoing edge (plus ENQUEUE when a target reaches 0),
                 then ADVANCE_COUNT
  TERMINAL       verdict: learn_count == count, or a cycle blocked nodes

Ordering is fixed: ascending-id seeding, strict FIFO, and relaxation in
edge-registration order.  Seeding happens only after every edge is
registered, so seeds come out in id order while later enqueues follow
relaxation order.  Both orders are part of the trace.

The whole trace is built eagerly and returned as a tuple.  Players need
random access for backward scrubbing, and a trace is small (linear in
V + E), so there is nothing to gain from streaming.
"""
from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence

from schedule_trace.domain.node_state import transition
from schedule_trace.domain.step import ActiveEdge, Step, VariableBinding
from schedule_trace.domain.types import Instruction, NodeId, NodeState
from schedule_trace.graph.adjacency import PrerequisiteGraph

log = logging.getLogger(__name__)

Trace = tuple[Step, ...]


class _Recorder:
    """Holds the working state for one run and snapshots it on demand."""

    __slots__ = ("count", "graph", "node_states", "queue", "learn_count", "steps")

    def __init__(self, count: int) -> None:
        self.count = count
        self.graph = PrerequisiteGraph(count)
        self.node_states: dict[NodeId, NodeState] = {
            n: NodeState.UNVISITED for n in range(count)
        }
        self.queue: deque[NodeId] = deque()
        self.learn_count = 0
        self.steps: list[Step] = []

    def emit(
        self,
        instruction: Instruction,
        description: str,
        variables: Iterable[tuple[str, object]] = (),
        edge: tuple[NodeId, NodeId] | None = None,
    ) -> None:
        self.steps.append(Step.capture(
            len(self.steps),
            description,
            instruction,
            node_states=self.node_states,
            in_degree=self.graph.in_degrees(),
            queue=self.queue,
            learn_count=self.learn_count,
            variables=[
                VariableBinding(name, str(value), instruction)
                for name, value in variables
            ],
            highlighted_edge=None if edge is None else ActiveEdge(*edge),
        ))

    def enqueue(self, node: NodeId) -> None:
        self.queue.append(node)
        transition(self.node_states, node, NodeState.IN_QUEUE)


def _bool_literal(value: bool) -> str:
    return "true" if value else "false"


def generate_trace(count: int, edges: Iterable[Sequence[int]]) -> Trace:
    """Run Kahn's algorithm over *edges* and return every Step.

    *count* is the number of nodes; *edges* are ``(from, to)`` pairs
    with both ends in ``range(count)``.  Input is not validated.
    A cycle is reported through the terminal Step, never raised.
    """
    rec = _Recorder(count)
    graph = rec.graph

    rec.emit(
        Instruction.INIT,
        "Initialize the adjacency list and in-degree array",
        [("numCourses", count)],
    )

    for src, dst in edges:
        new_deg = graph.add_edge(src, dst)
        rec.emit(
            Instruction.REGISTER_EDGE,
            f"Register prerequisite: course {src} -> course {dst}",
            [("from", src), ("to", dst), ("ingressCount[to]", new_deg)],
            edge=(src, dst),
        )

    rec.emit(
        Instruction.BEGIN_SCAN,
        "Begin topological sort: look for courses with in-degree 0",
    )

    for node in range(count):
        if graph.in_degree(node) == 0:
            rec.enqueue(node)
            rec.emit(
                Instruction.SEED_QUEUE,
                f"Course {node} has in-degree 0, add it to the queue",
                [("i", node), ("ingressCount[i]", 0)],
            )

    while rec.queue:
        course = rec.queue.popleft()
        transition(rec.node_states, course, NodeState.COMPLETED)
        rec.emit(
            Instruction.DEQUEUE,
            f"Take course {course} from the queue",
            [("course", course)],
        )

        for to_course in graph.successors(course):
            remaining = graph.satisfy(to_course)
            rec.emit(
                Instruction.RELAX_EDGE,
                f"Resolve dependency: in-degree of course {to_course} drops by 1",
                [("toCourse", to_course), ("ingressCount[toCourse]", remaining)],
                edge=(course, to_course),
            )
            if remaining == 0:
                rec.enqueue(to_course)
                rec.emit(
                    Instruction.ENQUEUE,
                    f"Course {to_course} now has in-degree 0, add it to the queue",
                    [("toCourse", to_course), ("ingressCount[toCourse]", 0)],
                )

        rec.learn_count += 1
        rec.emit(
            Instruction.ADVANCE_COUNT,
            f"Finished course {course}, {rec.learn_count} learned so far",
            [("learnCount", rec.learn_count)],
        )

    finished = rec.learn_count == count
    if finished:
        verdict = "all courses can be completed"
    else:
        verdict = "not all courses can be completed (circular dependency)"
    rec.emit(
        Instruction.TERMINAL,
        f"Algorithm finished: {verdict}",
        [
            ("learnCount", rec.learn_count),
            ("numCourses", count),
            ("return", _bool_literal(finished)),
        ],
    )

    log.debug(
        "trace generated: nodes=%d edges=%d steps=%d learned=%d finished=%s",
        count, graph.edge_count, len(rec.steps), rec.learn_count, finished,
    )
    return tuple(rec.steps)
