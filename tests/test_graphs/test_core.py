"""Tests for the DiGraph store."""

import dataclasses

import numpy as np
import pytest

from digraphs.graphs import DiGraph, Edge


class TestVertices:
    """Tests for vertex creation and lookup."""

    def test_empty_graph(self):
        """Test empty graph creation."""
        G = DiGraph()
        assert len(G) == 0
        assert G.vertices() == []
        assert G.edges() == []
        assert G.edge_count() == 0

    def test_create_vertex(self):
        """Test creating vertices."""
        G = DiGraph()
        G.create_vertex(2)
        G.create_vertex(1)
        assert G.vertices() == [1, 2]
        assert G.vertex_exists(1)
        assert 2 in G
        assert not G.vertex_exists(3)

    def test_create_vertex_idempotent(self):
        """Creating an existing vertex keeps its edges."""
        G = DiGraph()
        G.add_edge(1, 2)
        G.create_vertex(1)
        assert G.vertex_count() == 2
        assert G.successors(1) == [2]

    def test_declared_counts_are_metadata(self):
        """Declared counts are stored but not reconciled."""
        G = DiGraph(10, 20)
        G.add_edge(1, 2)
        assert G.declared_vertex_count == 10
        assert G.declared_edge_count == 20
        assert G.vertex_count() == 2
        assert G.edge_count() == 1


class TestAddEdge:
    """Tests for edge insertion."""

    def test_add_edge_creates_endpoints(self):
        """Missing endpoints are created."""
        G = DiGraph()
        G.add_edge(1, 2, 3)
        assert G.vertices() == [1, 2]

    def test_add_edge_visible_immediately(self):
        """edges_from contains the new edge right after insertion."""
        G = DiGraph()
        edge = G.add_edge(1, 2, -4)
        assert edge.origin == 1
        assert edge.destination == 2
        assert edge.weight == -4
        assert edge in G.edges_from(1)
        assert edge in G.edges_to(2)

    def test_default_weight(self):
        G = DiGraph()
        assert G.add_edge(1, 2).weight == 1

    def test_edge_ids_unique_and_increasing(self):
        """Edge ids are unique and follow creation order."""
        G = DiGraph()
        ids = [G.add_edge(u, v).id for u, v in [(1, 2), (2, 3), (1, 2), (3, 3)]]
        assert ids == sorted(ids)
        assert len(set(ids)) == 4

    def test_edge_ids_not_reused_after_removal(self):
        """Removing edges never frees ids for reuse."""
        G = DiGraph()
        first = G.add_edge(1, 2, 5)
        G.remove_edge(1, 2, 5)
        second = G.add_edge(1, 2, 5)
        assert second.id > first.id

    def test_ids_are_per_graph(self):
        """Each graph owns its own id counter."""
        G1 = DiGraph()
        G2 = DiGraph()
        G1.add_edge(1, 2)
        G1.add_edge(2, 3)
        assert G2.add_edge(1, 2).id == 0

    def test_parallel_edges(self):
        """Repeated insertion keeps every parallel edge."""
        G = DiGraph()
        G.add_edge(1, 2, 5)
        G.add_edge(1, 2, 5)
        G.add_edge(1, 2, 7)
        between = G.edges_between(1, 2)
        assert [e.weight for e in between] == [5, 5, 7]
        assert len({e.id for e in between}) == 3
        assert G.edge_count() == 3

    def test_self_loop(self):
        G = DiGraph()
        loop = G.add_edge(1, 1, 2)
        assert G.edges_from(1) == [loop]
        assert G.edges_to(1) == [loop]
        assert G.vertex_count() == 1

    @pytest.mark.parametrize("weight", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_weight(self, weight):
        G = DiGraph()
        G.add_edge(1, 2, 3)
        with pytest.raises(ValueError, match="finite"):
            G.add_edge(2, 3, weight)
        assert G.vertices() == [1, 2]
        assert G.edge_count() == 1
        assert G.add_edge(2, 3).id == 1

    @pytest.mark.parametrize("weight", [True, False, "3", None])
    def test_rejects_non_real_weight(self, weight):
        G = DiGraph()
        with pytest.raises(TypeError, match="real number"):
            G.add_edge(1, 2, weight)
        assert len(G) == 0

    def test_accepts_numpy_weight(self):
        G = DiGraph()
        edge = G.add_edge(1, 2, np.float64(-1.5))
        assert edge.weight == -1.5



class TestRemoveEdge:
    """Tests for edge removal by weight."""

    def test_remove_matching_weight_only(self):
        """Removing (1, 2, 5) leaves the parallel (1, 2, 7) edge."""
        G = DiGraph()
        G.add_edge(1, 2, 5)
        kept = G.add_edge(1, 2, 7)

        assert G.remove_edge(1, 2, 5) == 1
        assert G.edges_from(1) == [kept]
        assert G.edges_to(2) == [kept]
        assert G.edge_count() == 1

    def test_remove_all_equal_weights(self):
        """Every parallel edge with the given weight is removed."""
        G = DiGraph()
        G.add_edge(1, 2, 5)
        G.add_edge(1, 2, 5)
        assert G.remove_edge(1, 2, 5) == 2
        assert G.edges_from(1) == []
        assert G.edges_to(2) == []

    def test_remove_keeps_other_pairs(self):
        G = DiGraph()
        G.add_edge(1, 2, 5)
        other = G.add_edge(1, 3, 5)
        G.remove_edge(1, 2, 5)
        assert G.edges_from(1) == [other]

    def test_remove_no_match_is_noop(self):
        G = DiGraph()
        G.add_edge(1, 2, 5)
        assert G.remove_edge(1, 2, 6) == 0
        assert G.remove_edge(2, 1, 5) == 0
        assert G.remove_edge(8, 9, 5) == 0
        assert G.edge_count() == 1

    def test_remove_keeps_vertices(self):
        """Vertices are never removed."""
        G = DiGraph()
        G.add_edge(1, 2, 5)
        G.remove_edge(1, 2, 5)
        assert G.vertices() == [1, 2]

    def test_remove_int_float_equal_weights(self):
        """Weights compare numerically, so 5 matches 5.0."""
        G = DiGraph()
        G.add_edge(1, 2, 5.0)
        assert G.remove_edge(1, 2, 5) == 1


class TestQueries:
    """Tests for adjacency queries."""

    def test_edges_from_sorted(self):
        """Outgoing edges are sorted by destination, then id."""
        G = DiGraph()
        G.add_edge(1, 3)
        G.add_edge(1, 2)
        G.add_edge(1, 3)
        edges = G.edges_from(1)
        assert [(e.destination, e.id) for e in edges] == [(2, 1), (3, 0), (3, 2)]

    def test_edges_to_sorted(self):
        """Incoming edges are sorted by origin, then id."""
        G = DiGraph()
        G.add_edge(3, 1)
        G.add_edge(2, 1)
        edges = G.edges_to(1)
        assert [e.origin for e in edges] == [2, 3]

    def test_successors_predecessors(self):
        G = DiGraph()
        G.add_edge(1, 2)
        G.add_edge(1, 3)
        G.add_edge(1, 3)
        G.add_edge(4, 3)
        assert G.successors(1) == [2, 3, 3]
        assert G.predecessors(3) == [1, 1, 4]
        assert G.successors(3) == []

    def test_absent_key_returns_none(self):
        """Queries on absent keys return None instead of raising."""
        G = DiGraph()
        assert G.edges_from(1) is None
        assert G.edges_to(1) is None
        assert G.successors(1) is None
        assert G.predecessors(1) is None
        assert G.edges_between(1, 2) == []

    def test_edges_global_order(self):
        """edges() is sorted by (origin, destination, id)."""
        G = DiGraph()
        G.add_edge(2, 1)
        G.add_edge(1, 3)
        G.add_edge(1, 2)
        assert [(e.origin, e.destination) for e in G.edges()] == [(1, 2), (1, 3), (2, 1)]

    def test_queries_return_copies(self):
        """Mutating a returned list does not affect the graph."""
        G = DiGraph()
        G.add_edge(1, 2)
        edges = G.edges_from(1)
        edges.clear()
        G.edges_between(1, 2).clear()
        assert len(G.edges_from(1)) == 1

    def test_edges_are_immutable(self):
        G = DiGraph()
        edge = G.add_edge(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.weight = 10

    def test_iteration_sorted(self):
        G = DiGraph()
        G.add_edge(3, 1)
        G.create_vertex(2)
        assert list(G) == [1, 2, 3]


class TestCopy:
    """Tests for DiGraph.copy."""

    def test_copy_is_independent(self):
        G = DiGraph(2, 1)
        G.add_edge(1, 2, 4)
        H = G.copy()
        H.add_edge(2, 1, 1)
        assert G.edge_count() == 1
        assert H.edge_count() == 2
        assert H.declared_vertex_count == 2

    def test_copy_preserves_ids_and_counter(self):
        G = DiGraph()
        G.add_edge(1, 2)
        G.add_edge(2, 3)
        H = G.copy()
        assert H.edges() == G.edges()
        assert H.add_edge(3, 1).id == 2


def test_edge_repr():
    edge = Edge(3, 1, 2, -1)
    assert repr(edge) == "Edge(#3: 1 -> 2, w=-1)"
