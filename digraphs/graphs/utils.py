"""
Utility functions for graph algorithms.

Provides helpers for node indexing, path reconstruction, path weights and
dense weight-matrix export.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .core import DiGraph, Weight


def node_index_map(nodes: Iterable[int]) -> Tuple[Dict[int, int], List[int]]:
    """
    Create deterministic mapping from vertex keys to indices 0..n-1.

    Args:
        nodes: Iterable of vertex keys.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map([3, 1, 2])
        >>> node_to_idx
        {1: 0, 2: 1, 3: 2}
        >>> idx_to_node
        [1, 2, 3]
    """
    sorted_nodes = sorted(set(nodes))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def reconstruct_path(
    parent: Dict[int, Optional[int]], target: int
) -> Optional[List[int]]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from bellman_ford or depth_first_search,
    where parent[node] is the previous node on the path, or None if node is
    a root/source. Callers must check reachability first: an unreachable
    node also has parent None and would come back as a one-node path.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), or None if target
        is not in the map or the parent chain loops.

    Example:
        >>> parent = {1: None, 2: 1, 3: 2}
        >>> reconstruct_path(parent, 3)
        [1, 2, 3]
        >>> reconstruct_path(parent, 4)
        None
    """
    if target not in parent:
        return None

    path = []
    current: Optional[int] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Parent chains loop only when a negative cycle was relaxed.
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path


def path_weight(graph: DiGraph, path: Sequence[int]) -> Optional[Weight]:
    """
    Sum of edge weights along a vertex path.

    Between consecutive vertices the lightest parallel edge is used.

    Args:
        graph: Graph the path lives in.
        path: Sequence of vertex keys.

    Returns:
        Total weight (0 for a single vertex), or None if some consecutive pair
        has no edge.
    """
    total: Weight = 0
    for u, v in zip(path, path[1:]):
        edges = graph.edges_between(u, v)
        if not edges:
            return None
        total += min(e.weight for e in edges)
    return total


def weight_matrix(graph: DiGraph, nodes: Optional[List[int]] = None) -> np.ndarray:
    """
    Dense weight matrix of a graph.

    W[i, j] is the smallest weight among edges from nodes[i] to nodes[j], and
    inf where there is no such edge (including the diagonal, unless there is
    a self-loop).

    Args:
        graph: DiGraph instance.
        nodes: Optional list of vertex keys to include (defaults to all
            vertices in ascending order).

    Returns:
        (n, n) float array in node index order.

    Example:
        >>> G = DiGraph()
        >>> G.add_edge(1, 2, 3)
        >>> weight_matrix(G)
        array([[inf,  3.],
               [inf, inf]])
    """
    if nodes is None:
        nodes = graph.vertices()

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)
    W = np.full((n, n), np.inf)

    for u in idx_to_node:
        i = node_to_idx[u]
        for edge in graph.edges_from(u) or []:
            j = node_to_idx.get(edge.destination)
            if j is not None:
                W[i, j] = min(W[i, j], edge.weight)

    return W
