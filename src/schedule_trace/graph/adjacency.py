"""Prerequisite graph over integer node ids, plus the input normalizer.

Nodes are the integers ``0..count-1``.  Edges ``(src, dst)`` mean "src
must be completed before dst".  Internally the graph keeps a forward
adjacency dict (src -> list of dst, in insertion order) and a flat
in-degree list indexed by node id, which is exactly the working state
Kahn's algorithm needs.

Duplicate edges are kept, not collapsed: two identical prerequisite
pairs contribute two to the target's in-degree and are relaxed twice.
Nothing is range-checked.  Out-of-range ids are a caller bug and
whatever Python raises (usually IndexError) propagates.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from schedule_trace.domain.types import Edge, NodeId


class PrerequisiteGraph:
    """Directed multigraph on ``range(count)`` with tracked in-degrees."""

    __slots__ = ("_count", "_next", "_in_deg")

    def __init__(self, count: int) -> None:
        self._count = count
        self._next: dict[NodeId, list[NodeId]] = {}
        self._in_deg: list[int] = [0] * count

    # ---- mutation --------------------------------------------------------

    def add_edge(self, src: NodeId, dst: NodeId) -> int:
        """Register edge src -> dst and return dst's new in-degree."""
        self._in_deg[dst] += 1
        self._next.setdefault(src, []).append(dst)
        return self._in_deg[dst]

    def satisfy(self, dst: NodeId) -> int:
        """Mark one prerequisite of *dst* as met and return what is left.

        Only the in-degree changes; the edge stays in the adjacency list.
        """
        self._in_deg[dst] -= 1
        return self._in_deg[dst]

    # ---- queries ---------------------------------------------------------

    def successors(self, node: NodeId) -> list[NodeId]:
        """Targets of edges leaving *node*, in registration order."""
        return list(self._next.get(node, []))

    def in_degree(self, node: NodeId) -> int:
        return self._in_deg[node]

    def in_degrees(self) -> list[int]:
        """A fresh copy of the in-degree list."""
        return list(self._in_deg)

    def out_degree(self, node: NodeId) -> int:
        return len(self._next.get(node, []))

    def nodes(self) -> Iterator[NodeId]:
        return iter(range(self._count))

    def edges(self) -> Iterator[Edge]:
        for src, dsts in self._next.items():
            for dst in dsts:
                yield src, dst

    @property
    def node_count(self) -> int:
        return self._count

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._next.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < self._count

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"PrerequisiteGraph(nodes={self.node_count}, edges={self.edge_count})"


def normalize(count: int, edges: Iterable[Sequence[int]]) -> PrerequisiteGraph:
    """Build the adjacency mapping and initial in-degrees for *edges*.

    Edges are applied strictly in the given order.
    """
    graph = PrerequisiteGraph(count)
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph
