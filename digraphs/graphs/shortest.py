"""
Single-source shortest paths with negative edge weights (Bellman-Ford).

Distances live in the extended reals: ordinary int/float values plus INF
for unreachable vertices. INF compares greater than every finite value and
INF + w == INF for finite w, so relaxation never needs a sentinel constant.

Negative cycles are not detected. If relaxation is still changing values on
the last allowed pass the result is flagged as not converged and the
potentials of vertices downstream of a negative cycle are meaningless.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.1 (The Bellman-Ford algorithm).
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..errors import VertexNotFoundError
from ..logging import get_logger
from .core import DiGraph
from .utils import reconstruct_path

logger = get_logger(__name__)

Potential = Union[int, float]

INF: float = math.inf


def is_finite(value: Potential) -> bool:
    """Return True if value is an ordinary number (not INF, -inf or NaN)."""
    return math.isfinite(value)


def extended_add(a: Potential, b: Potential) -> Potential:
    """
    Add two extended reals.

    INF absorbs finite values. Negative infinity is not part of the domain.

    Example:
        >>> extended_add(2, -5)
        -3
        >>> extended_add(INF, -5)
        inf
    """
    if not is_finite(a) or not is_finite(b):
        return INF
    return a + b


@dataclass
class BellmanFordResult:
    """
    Outcome of a Bellman-Ford run.

    Attributes:
        source: Source vertex.
        potential: Vertex -> shortest distance from source (INF if unreachable).
        predecessor: Vertex -> previous vertex on a shortest path (None for the
            source and unreachable vertices).
        passes: Number of relaxation passes performed.
        converged: False if the last allowed pass still changed a potential.
    """

    source: int
    potential: Dict[int, Potential] = field(default_factory=dict)
    predecessor: Dict[int, Optional[int]] = field(default_factory=dict)
    passes: int = 0
    converged: bool = True

    def distance(self, vertex: int) -> Potential:
        return self.potential[vertex]

    def reachable(self, vertex: int) -> bool:
        return vertex in self.potential and is_finite(self.potential[vertex])

    def path_to(self, vertex: int) -> Optional[List[int]]:
        """
        Shortest path from the source to vertex.

        Returns:
            List of keys from source to vertex (inclusive), or None if vertex
            is unreachable.
        """
        if not self.reachable(vertex):
            return None
        return reconstruct_path(self.predecessor, vertex)


def bellman_ford(graph: DiGraph, source: int) -> BellmanFordResult:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Runs up to |V| relaxation passes over every edge in (origin, destination,
    id) order and stops early at the first pass that changes nothing. An
    edge (u, v, w) is only relaxed when potential[u] is finite.

    Args:
        graph: DiGraph (may have negative weights). Must not be mutated during
            the call.
        source: Source vertex key.

    Returns:
        BellmanFordResult with potential and predecessor maps.

    Raises:
        VertexNotFoundError: If source is not in graph.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> G = DiGraph()
        >>> G.add_edge(1, 2, 1)
        >>> G.add_edge(2, 3, -2)
        >>> result = bellman_ford(G, 1)
        >>> result.potential[3]
        -1
    """
    if not graph.vertex_exists(source):
        raise VertexNotFoundError(source)

    result = BellmanFordResult(source=source)
    potential = result.potential
    predecessor = result.predecessor

    for vertex in graph.vertices():
        potential[vertex] = INF
        predecessor[vertex] = None
    potential[source] = 0

    edges = graph.edges()
    n = graph.vertex_count()
    changed = False

    for _ in range(n):
        changed = False
        result.passes += 1
        for edge in edges:
            pu = potential[edge.origin]
            if not is_finite(pu):
                continue
            candidate = pu + edge.weight
            if potential[edge.destination] > candidate:
                potential[edge.destination] = candidate
                predecessor[edge.destination] = edge.origin
                changed = True
        if not changed:
            break

    result.converged = not changed
    if not result.converged:
        logger.warning(
            "Bellman-Ford from %s still relaxing after %d passes; "
            "a negative cycle is reachable and distances are unreliable",
            source,
            result.passes,
        )
    else:
        logger.debug("Bellman-Ford from %s converged after %d passes", source, result.passes)

    return result
