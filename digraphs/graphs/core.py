"""
Core graph data structures.

Provides the directed, weighted multigraph DiGraph used by every analysis in
this package. Vertices are integer keys; edges are immutable Edge records
carrying a graph-unique id, so parallel edges between the same pair of
vertices stay distinguishable.

Each vertex keeps a forward map (outgoing edges) and a backward map (incoming
edges). Every mutation updates both maps together.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..diagnostics import assert_adjacency_symmetric, is_debug_enabled

Weight = Union[int, float]


def _check_weight(weight: Weight) -> None:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise TypeError(f"Edge weight must be a real number, got {weight!r}")
    if not math.isfinite(weight):
        raise ValueError(f"Edge weight must be finite, got {weight!r}")


@dataclass(frozen=True, order=True)
class Edge:
    """
    Directed weighted edge.

    Edges order by id, which is also their creation order.

    Attributes:
        id: Identifier unique for the lifetime of the owning graph.
        origin: Key of the tail vertex.
        destination: Key of the head vertex.
        weight: Real-valued weight (may be negative).
    """

    id: int
    origin: int
    destination: int
    weight: Weight = 1

    def __repr__(self) -> str:
        return f"Edge(#{self.id}: {self.origin} -> {self.destination}, w={self.weight})"


@dataclass
class _Vertex:
    key: int
    # (origin, destination) -> edges in insertion order
    out_edges: Dict[Tuple[int, int], List[Edge]] = field(default_factory=dict)
    # (destination, origin) -> edges in insertion order
    in_edges: Dict[Tuple[int, int], List[Edge]] = field(default_factory=dict)

    def add_out(self, edge: Edge) -> None:
        self.out_edges.setdefault((self.key, edge.destination), []).append(edge)

    def add_in(self, edge: Edge) -> None:
        self.in_edges.setdefault((self.key, edge.origin), []).append(edge)

    def remove_out(self, destination: int, weight: Weight) -> List[Edge]:
        return _remove_matching(self.out_edges, (self.key, destination), weight)

    def remove_in(self, origin: int, weight: Weight) -> List[Edge]:
        return _remove_matching(self.in_edges, (self.key, origin), weight)


def _remove_matching(
    table: Dict[Tuple[int, int], List[Edge]], pair: Tuple[int, int], weight: Weight
) -> List[Edge]:
    edges = table.get(pair)
    if not edges:
        return []

    removed = [e for e in edges if e.weight == weight]
    if not removed:
        return []

    kept = [e for e in edges if e.weight != weight]
    if kept:
        table[pair] = kept
    else:
        del table[pair]
    return removed


class DiGraph:
    """
    Directed weighted multigraph with adjacency-list representation.

    Parallel edges and self-loops are allowed. Query methods return fresh
    lists of immutable Edge values sorted for deterministic behavior; an
    absent vertex key yields None rather than an exception.

    Args:
        vertex_count: Declared number of vertices (advisory metadata).
        edge_count: Declared number of edges (advisory metadata).

    Complexity:
        - create_vertex: O(1)
        - add_edge: O(1) amortized
        - remove_edge: O(k) where k is the number of edges between the pair
        - edges_from / edges_to: O(deg(v) log deg(v))
        - vertices: O(V log V)
        - edges: O(E log E)
    """

    def __init__(self, vertex_count: int = 0, edge_count: int = 0):
        self.declared_vertex_count = vertex_count
        self.declared_edge_count = edge_count
        self._vertices: Dict[int, _Vertex] = {}
        self._next_edge_id = 0
        self._edge_total = 0

    def __repr__(self) -> str:
        return f"DiGraph(vertices={len(self._vertices)}, edges={self._edge_total})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    # --- Mutation -----------------------------------------------------------

    def create_vertex(self, key: int) -> None:
        """
        Add a vertex to the graph. Does nothing if the key already exists.

        Args:
            key: Integer vertex key.
        """
        if key not in self._vertices:
            self._vertices[key] = _Vertex(key)

    def add_edge(self, origin: int, destination: int, weight: Weight = 1) -> Edge:
        """
        Add a directed edge from origin to destination.

        Missing endpoints are created. Existing edges between the same pair
        are kept, so repeated calls produce parallel edges.

        Args:
            origin: Tail vertex key.
            destination: Head vertex key.
            weight: Edge weight (default 1).

        Returns:
            The new Edge, carrying a freshly allocated id.

        Raises:
            TypeError: If weight is not a real number (bools included).
            ValueError: If weight is infinite or NaN.
        """
        _check_weight(weight)
        self.create_vertex(origin)
        self.create_vertex(destination)

        edge = Edge(self._next_edge_id, origin, destination, weight)
        self._next_edge_id += 1

        self._vertices[origin].add_out(edge)
        self._vertices[destination].add_in(edge)
        self._edge_total += 1

        if is_debug_enabled("symmetry"):
            assert_adjacency_symmetric(self)
        return edge

    def remove_edge(self, origin: int, destination: int, weight: Weight) -> int:
        """
        Remove the edges from origin to destination whose weight equals weight.

        Other parallel edges between the same pair are left untouched. Edge
        ids of removed edges are never reused.

        Args:
            origin: Tail vertex key.
            destination: Head vertex key.
            weight: Weight the removed edges must have.

        Returns:
            Number of edges removed (0 if nothing matched).
        """
        tail = self._vertices.get(origin)
        head = self._vertices.get(destination)
        if tail is None or head is None:
            return 0

        removed = tail.remove_out(destination, weight)
        head.remove_in(origin, weight)
        self._edge_total -= len(removed)

        if is_debug_enabled("symmetry"):
            assert_adjacency_symmetric(self)
        return len(removed)

    # --- Queries ------------------------------------------------------------

    def vertex_exists(self, key: int) -> bool:
        """Return True if the graph holds a vertex with this key."""
        return key in self._vertices

    def vertices(self) -> List[int]:
        """
        Return all vertex keys in ascending order.

        Returns:
            Sorted list of keys.
        """
        return sorted(self._vertices)

    def vertex_count(self) -> int:
        """Actual number of vertices (may differ from declared_vertex_count)."""
        return len(self._vertices)

    def edge_count(self) -> int:
        """Actual number of edges (may differ from declared_edge_count)."""
        return self._edge_total

    def edges_from(self, key: int) -> Optional[List[Edge]]:
        """
        Return the outgoing edges of a vertex.

        Args:
            key: Vertex key.

        Returns:
            Edges sorted by (destination, id), or None if the key is absent.
        """
        vertex = self._vertices.get(key)
        if vertex is None:
            return None
        edges = [e for group in vertex.out_edges.values() for e in group]
        return sorted(edges, key=lambda e: (e.destination, e.id))

    def edges_to(self, key: int) -> Optional[List[Edge]]:
        """
        Return the incoming edges of a vertex.

        Args:
            key: Vertex key.

        Returns:
            Edges sorted by (origin, id), or None if the key is absent.
        """
        vertex = self._vertices.get(key)
        if vertex is None:
            return None
        edges = [e for group in vertex.in_edges.values() for e in group]
        return sorted(edges, key=lambda e: (e.origin, e.id))

    def edges_between(self, origin: int, destination: int) -> List[Edge]:
        """Return the edges from origin to destination, sorted by id."""
        vertex = self._vertices.get(origin)
        if vertex is None:
            return []
        return list(vertex.out_edges.get((origin, destination), []))

    def successors(self, key: int) -> Optional[List[int]]:
        """
        Return destination keys of the outgoing edges of a vertex.

        One entry per edge, so parallel edges repeat a key.

        Returns:
            List of keys in edges_from order, or None if the key is absent.
        """
        edges = self.edges_from(key)
        if edges is None:
            return None
        return [e.destination for e in edges]

    def predecessors(self, key: int) -> Optional[List[int]]:
        """
        Return origin keys of the incoming edges of a vertex.

        Returns:
            List of keys in edges_to order, or None if the key is absent.
        """
        edges = self.edges_to(key)
        if edges is None:
            return None
        return [e.origin for e in edges]

    def edges(self) -> List[Edge]:
        """
        Return every edge of the graph.

        Returns:
            Edges sorted by (origin, destination, id).
        """
        edges_list = [
            e
            for vertex in self._vertices.values()
            for group in vertex.out_edges.values()
            for e in group
        ]
        return sorted(edges_list, key=lambda e: (e.origin, e.destination, e.id))

    def copy(self) -> "DiGraph":
        """
        Return an independent copy with the same edges, ids and id counter.
        """
        clone = DiGraph(self.declared_vertex_count, self.declared_edge_count)
        for key in self._vertices:
            clone.create_vertex(key)
        for edge in self.edges():
            clone._vertices[edge.origin].add_out(edge)
            clone._vertices[edge.destination].add_in(edge)
        clone._next_edge_id = self._next_edge_id
        clone._edge_total = self._edge_total
        return clone

    def _adjacency_tables(
        self,
    ) -> Iterator[Tuple[int, Dict[Tuple[int, int], List[Edge]], Dict[Tuple[int, int], List[Edge]]]]:
        for key, vertex in self._vertices.items():
            yield key, vertex.out_edges, vertex.in_edges
