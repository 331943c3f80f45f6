"""Tests for PrerequisiteGraph and the input normalizer."""
from __future__ import annotations

from schedule_trace.graph.adjacency import PrerequisiteGraph, normalize


class TestPrerequisiteGraph:
    def test_empty_graph(self) -> None:
        g = PrerequisiteGraph(0)
        assert g.node_count == 0
        assert g.edge_count == 0
        assert list(g.nodes()) == []
        assert list(g.edges()) == []
        assert g.in_degrees() == []

    def test_isolated_nodes(self) -> None:
        g = PrerequisiteGraph(3)
        assert list(g.nodes()) == [0, 1, 2]
        assert g.in_degrees() == [0, 0, 0]
        assert g.successors(1) == []

    def test_add_edge_returns_new_in_degree(self) -> None:
        g = PrerequisiteGraph(3)
        assert g.add_edge(0, 2) == 1
        assert g.add_edge(1, 2) == 2
        assert g.in_degree(2) == 2
        assert g.out_degree(0) == 1

    def test_satisfy_keeps_edge(self) -> None:
        g = PrerequisiteGraph(2)
        g.add_edge(0, 1)
        assert g.satisfy(1) == 0
        assert g.in_degree(1) == 0
        assert g.successors(0) == [1]

    def test_successors_returns_copy(self) -> None:
        g = PrerequisiteGraph(2)
        g.add_edge(0, 1)
        g.successors(0).append(0)
        assert g.successors(0) == [1]

    def test_in_degrees_returns_copy(self) -> None:
        g = PrerequisiteGraph(2)
        g.add_edge(0, 1)
        snapshot = g.in_degrees()
        g.add_edge(0, 1)
        assert snapshot == [0, 1]
        assert g.in_degrees() == [0, 2]

    def test_contains(self) -> None:
        g = PrerequisiteGraph(2)
        assert 0 in g
        assert 1 in g
        assert 2 not in g
        assert -1 not in g
        assert "0" not in g

    def test_repr(self) -> None:
        g = normalize(3, [(0, 1)])
        assert repr(g) == "PrerequisiteGraph(nodes=3, edges=1)"
        assert len(g) == 3


class TestNormalize:
    def test_adjacency_preserves_input_order(self) -> None:
        g = normalize(4, [(0, 3), (0, 1), (0, 2)])
        assert g.successors(0) == [3, 1, 2]

    def test_duplicates_are_kept(self) -> None:
        g = normalize(2, [(0, 1), (0, 1)])
        assert g.successors(0) == [1, 1]
        assert g.in_degree(1) == 2
        assert g.edge_count == 2

    def test_in_degree_counts(self, diamond_edges) -> None:
        g = normalize(4, diamond_edges)
        assert g.in_degrees() == [0, 1, 1, 2]

    def test_accepts_list_pairs(self) -> None:
        g = normalize(3, [[2, 0], [2, 1]])
        assert g.successors(2) == [0, 1]
        assert g.in_degrees() == [1, 1, 0]

    def test_edges_round_trip_per_source(self, chain_edges) -> None:
        g = normalize(4, chain_edges)
        assert sorted(g.edges()) == sorted(chain_edges)
