"""Benchmark DFS classification and Bellman-Ford on random graphs."""

import time
from typing import Dict

import numpy as np

from digraphs import DiGraph, bellman_ford, depth_first_search


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> DiGraph:
    """Random multigraph with non-negative integer weights."""
    rng = np.random.default_rng(seed)
    graph = DiGraph(n_vertices, n_edges)
    for key in range(n_vertices):
        graph.create_vertex(key)
    origins = rng.integers(0, n_vertices, size=n_edges)
    destinations = rng.integers(0, n_vertices, size=n_edges)
    weights = rng.integers(0, 100, size=n_edges)
    for u, v, w in zip(origins, destinations, weights):
        graph.add_edge(int(u), int(v), int(w))
    return graph


def benchmark_algorithms(n_vertices: int, n_edges: int) -> Dict[str, float]:
    """Time one DFS and one Bellman-Ford run.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges.

    Returns:
        Dictionary with timing results.
    """
    graph = random_graph(n_vertices, n_edges)

    start = time.perf_counter()
    depth_first_search(graph)
    dfs_time = time.perf_counter() - start

    start = time.perf_counter()
    result = bellman_ford(graph, 0)
    bf_time = time.perf_counter() - start

    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "dfs_time_sec": dfs_time,
        "bellman_ford_time_sec": bf_time,
        "bellman_ford_passes": result.passes,
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n, m in [(1_000, 5_000), (10_000, 50_000)]:
        results = benchmark_algorithms(n, m)
        print(f"V={n}, E={m}:")
        print(f"  DFS: {results['dfs_time_sec']*1e3:.2f} ms")
        print(
            f"  Bellman-Ford: {results['bellman_ford_time_sec']*1e3:.2f} ms "
            f"({results['bellman_ford_passes']} passes)"
        )
