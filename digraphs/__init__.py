"""digraphs - an in-memory directed multigraph with DFS edge classification and Bellman-Ford."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_adjacency_symmetric,
    assert_valid_dfs,
    debug_context,
    intervals_nested,
    is_adjacency_symmetric,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .errors import GraphError, MalformedInputError, VertexNotFoundError

# Graph store and algorithms
from .graphs import (
    INF,
    BellmanFordResult,
    DFSResult,
    DiGraph,
    Edge,
    EdgeClass,
    VertexState,
    bellman_ford,
    depth_first_search,
    extended_add,
    is_finite,
    node_index_map,
    path_weight,
    reconstruct_path,
    weight_matrix,
)

# Text format I/O
from .io import dump_graph_file, dump_graph_string, parse_graph_file, parse_graph_string

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph store
    "DiGraph",
    "Edge",
    # DFS
    "depth_first_search",
    "DFSResult",
    "EdgeClass",
    "VertexState",
    # Shortest paths
    "bellman_ford",
    "BellmanFordResult",
    "INF",
    "is_finite",
    "extended_add",
    # Utilities
    "node_index_map",
    "reconstruct_path",
    "path_weight",
    "weight_matrix",
    # I/O
    "parse_graph_string",
    "parse_graph_file",
    "dump_graph_string",
    "dump_graph_file",
    # Errors
    "GraphError",
    "VertexNotFoundError",
    "MalformedInputError",
    # Diagnostics
    "is_adjacency_symmetric",
    "assert_adjacency_symmetric",
    "intervals_nested",
    "assert_valid_dfs",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
