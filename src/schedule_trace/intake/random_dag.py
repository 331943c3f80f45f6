"""Random connected DAGs for demos and property tests.

Strategy:
  1.  Shuffle the node ids; the shuffled order is the DAG's
      topological order.
  2.  Spine: every node after the first gets one edge *to* a random
      earlier node, so the graph is weakly connected.
  3.  Extras: between count//2 and count-1 more edges, each from a
      later node to an earlier one, skipping pairs already present.
      Attempts are capped at three per wanted edge.

Edges always point from later to earlier in the shuffled order, so the
result is acyclic by construction.
"""
from __future__ import annotations

import random

from schedule_trace.domain.types import Edge


def random_dag(
    count: int,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> list[Edge]:
    """Return a random connected DAG on ``range(count)`` as an edge list.

    Pass *seed* for reproducible output, or an existing *rng* to draw
    from a shared generator.  *count* must be at least 2.
    """
    if count < 2:
        raise ValueError(f"Need at least 2 courses for a random graph, got {count}")
    rng = rng or random.Random(seed)

    order = list(range(count))
    rng.shuffle(order)

    edges: list[Edge] = []
    existing: set[Edge] = set()

    for i in range(1, count):
        edge = (order[i], order[rng.randrange(i)])
        existing.add(edge)
        edges.append(edge)

    extra = int(rng.random() * (count / 2)) + count // 2
    target = count - 1 + extra
    attempts = 0
    while len(edges) < target and attempts < extra * 3:
        attempts += 1
        later = rng.randrange(1, count)
        edge = (order[later], order[rng.randrange(later)])
        if edge not in existing:
            existing.add(edge)
            edges.append(edge)
    return edges
