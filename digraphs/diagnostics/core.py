"""Invariant checks for graphs and traversal results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from ..graphs.core import DiGraph
    from ..graphs.traversal import DFSResult


def is_adjacency_symmetric(graph: DiGraph) -> bool:
    """
    Check that the forward and backward maps of a graph describe the same edges.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    bool
        True if every outgoing entry has exactly one matching incoming entry.
    """
    forward: List[Tuple[int, int, int]] = []
    backward: List[Tuple[int, int, int]] = []
    for key, out_edges, in_edges in graph._adjacency_tables():
        for (origin, _), group in out_edges.items():
            forward.extend((e.id, e.origin, e.destination) for e in group if origin == key)
        for (destination, _), group in in_edges.items():
            backward.extend(
                (e.id, e.origin, e.destination) for e in group if destination == key
            )
    return sorted(forward) == sorted(backward)


def assert_adjacency_symmetric(graph: DiGraph) -> None:
    """
    Assert that the forward and backward maps of a graph agree.

    Raises
    ------
    ValueError
        If an edge is present in one map but not the other.
    """
    if not is_adjacency_symmetric(graph):
        raise ValueError(
            "Forward and backward adjacency maps disagree; "
            "the graph was mutated outside DiGraph.add_edge/remove_edge."
        )


def intervals_nested(discovery: Dict[int, int], finish: Dict[int, int]) -> bool:
    """
    Check the parenthesis structure of DFS timestamps.

    For every pair of vertices the [discovery, finish] intervals must be
    either disjoint or one must contain the other.

    Parameters
    ----------
    discovery, finish:
        Timestamps keyed by vertex.

    Returns
    -------
    bool
        True if the intervals are properly nested.
    """
    # Sweep in discovery order with a stack of open intervals.
    intervals = sorted((discovery[v], finish[v]) for v in discovery)
    open_ends: List[int] = []
    for start, end in intervals:
        if start >= end:
            return False
        while open_ends and open_ends[-1] < start:
            open_ends.pop()
        if open_ends and end > open_ends[-1]:
            return False
        open_ends.append(end)
    return True


def assert_valid_dfs(graph: DiGraph, result: DFSResult) -> None:
    """
    Assert that a DFS result is consistent with the graph it was computed on.

    Checks that every vertex is finished, every edge has exactly one
    classification, tree edges match the predecessor forest, and the
    timestamps nest.

    Raises
    ------
    ValueError
        On the first violated property.
    """
    from ..graphs.traversal import EdgeClass

    vertices = set(graph.vertices())
    if set(result.finish) != vertices or set(result.discovery) != vertices:
        raise ValueError("DFS did not discover and finish every vertex.")

    edge_ids = {e.id for e in graph.edges()}
    if set(result.classification) != edge_ids:
        raise ValueError("DFS classification does not cover exactly the graph's edges.")

    parents: Dict[int, int] = {}
    for edge in graph.edges():
        if result.classification[edge.id] is EdgeClass.TREE:
            if edge.destination in parents:
                raise ValueError(f"Vertex {edge.destination} has two tree parents.")
            parents[edge.destination] = edge.origin

    for vertex in vertices:
        if result.predecessor.get(vertex) != parents.get(vertex):
            raise ValueError(f"Predecessor of vertex {vertex} disagrees with tree edges.")
    if set(result.roots) != vertices - set(parents):
        raise ValueError("DFS roots are not exactly the vertices without a tree parent.")

    if not intervals_nested(result.discovery, result.finish):
        raise ValueError("DFS discovery/finish intervals are not properly nested.")
