"""
Example: Bellman-Ford with negative weights

Loads a weighted graph containing a negative edge, computes shortest paths
from vertex 1 and prints each distance together with the path behind it.
Then adds a negative cycle to show the non-converged flag.
"""

from digraphs import DiGraph, bellman_ford, path_weight


def print_paths(graph: DiGraph, source: int) -> None:
    result = bellman_ford(graph, source)
    for key in graph.vertices():
        if not result.reachable(key):
            print(f"  {key}: unreachable")
            continue
        path = result.path_to(key)
        hops = " -> ".join(str(v) for v in path)
        print(f"  {key}: distance {result.distance(key):>3}  via {hops}")
        assert path_weight(graph, path) == result.distance(key)
    print(f"  passes: {result.passes}, converged: {result.converged}")


def main() -> None:
    graph = DiGraph(5, 4)
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 3, 2)
    graph.add_edge(1, 3, 5)
    graph.add_edge(3, 4, -1)
    graph.create_vertex(5)

    print("=" * 60)
    print("Shortest paths from 1")
    print("=" * 60)
    print_paths(graph, 1)

    print()
    print("=" * 60)
    print("After adding 4 -> 2 with weight -3 (negative cycle 2 -> 3 -> 4 -> 2)")
    print("=" * 60)
    graph.add_edge(4, 2, -3)
    result = bellman_ford(graph, 1)
    print(f"  passes: {result.passes}, converged: {result.converged}")


if __name__ == "__main__":
    main()
