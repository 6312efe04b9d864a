"""Pytest configuration and shared fixtures for digraphs tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph tests
- Small sample graphs used across test modules
"""

import os

import numpy as np
import pytest

from digraphs import DiGraph
from digraphs.diagnostics import set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Run every test with debug mode off unless the test turns it on."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def scenario_a() -> DiGraph:
    """Weighted graph with one negative edge: 1->2 (1), 2->3 (2), 1->3 (5), 3->4 (-1)."""
    G = DiGraph(4, 4)
    G.add_edge(1, 2, 1)
    G.add_edge(2, 3, 2)
    G.add_edge(1, 3, 5)
    G.add_edge(3, 4, -1)
    return G


@pytest.fixture
def all_classes_graph() -> DiGraph:
    """Graph whose DFS from 1 produces every edge class.

    1->2, 2->3 (tree), 3->1 (back), 1->3 (forward), 4->2 (cross).
    """
    G = DiGraph()
    G.add_edge(1, 2)
    G.add_edge(2, 3)
    G.add_edge(3, 1)
    G.add_edge(1, 3)
    G.add_edge(4, 2)
    return G


def random_graph(
    rng: np.random.Generator,
    n_vertices: int,
    n_edges: int,
    min_weight: int = 0,
    max_weight: int = 10,
) -> DiGraph:
    """Build a random multigraph on keys 0..n_vertices-1 with integer weights."""
    G = DiGraph(n_vertices, n_edges)
    for key in range(n_vertices):
        G.create_vertex(key)
    origins = rng.integers(0, n_vertices, size=n_edges)
    destinations = rng.integers(0, n_vertices, size=n_edges)
    weights = rng.integers(min_weight, max_weight + 1, size=n_edges)
    for u, v, w in zip(origins, destinations, weights):
        G.add_edge(int(u), int(v), int(w))
    return G


def random_dag(
    rng: np.random.Generator,
    n_vertices: int,
    n_edges: int,
    min_weight: int = -5,
    max_weight: int = 10,
) -> DiGraph:
    """Build a random DAG (edges go from smaller to larger key) with integer weights.

    Negative weights are safe because a DAG has no cycles.
    """
    G = DiGraph(n_vertices, n_edges)
    for key in range(n_vertices):
        G.create_vertex(key)
    for _ in range(n_edges):
        u, v = sorted(int(x) for x in rng.choice(n_vertices, size=2, replace=False))
        G.add_edge(u, v, int(rng.integers(min_weight, max_weight + 1)))
    return G


@pytest.fixture
def make_random_graph(rng: np.random.Generator):
    """Factory fixture: make_random_graph(n_vertices, n_edges, ...) -> DiGraph."""

    def _make(n_vertices: int, n_edges: int, **kwargs) -> DiGraph:
        return random_graph(rng, n_vertices, n_edges, **kwargs)

    return _make


@pytest.fixture
def make_random_dag(rng: np.random.Generator):
    """Factory fixture: make_random_dag(n_vertices, n_edges, ...) -> DiGraph."""

    def _make(n_vertices: int, n_edges: int, **kwargs) -> DiGraph:
        return random_dag(rng, n_vertices, n_edges, **kwargs)

    return _make
