"""
Graph algorithms package for digraphs.

This package provides:
- The DiGraph store (weighted directed multigraph) and immutable Edge records
- Depth-first search with Tree/Back/Forward/Cross edge classification
- Bellman-Ford single-source shortest paths with negative weights
- Helpers for path reconstruction and dense weight matrices

All algorithms are deterministic and use sorted vertex/edge ordering for
reproducibility.
"""

from .core import DiGraph, Edge
from .shortest import INF, BellmanFordResult, bellman_ford, extended_add, is_finite
from .traversal import DFSResult, EdgeClass, VertexState, depth_first_search
from .utils import node_index_map, path_weight, reconstruct_path, weight_matrix

__all__ = [
    "DiGraph",
    "Edge",
    "depth_first_search",
    "DFSResult",
    "EdgeClass",
    "VertexState",
    "bellman_ford",
    "BellmanFordResult",
    "INF",
    "is_finite",
    "extended_add",
    "node_index_map",
    "reconstruct_path",
    "path_weight",
    "weight_matrix",
]

# Example usage:
# from digraphs.graphs import DiGraph, bellman_ford
#
# G = DiGraph()
# G.add_edge(1, 2, 1)
# G.add_edge(2, 3, -2)
# result = bellman_ford(G, 1)
# result.path_to(3)  # [1, 2, 3]
