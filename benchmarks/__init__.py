"""Performance benchmarks for digraphs.

This package contains microbenchmarks for the DFS classifier and the
Bellman-Ford solver on random graphs.
"""
