"""
Example: DFS edge classification

Builds a small directed graph with a cycle, a shortcut and a cross link,
runs a full depth-first search and prints the class, discovery and finish
time of everything it touched.
"""

from digraphs import EdgeClass, depth_first_search, parse_graph_string

GRAPH = """\
# vertices edges
5 6
1 2
2 3
3 1
1 3
4 2
4 5
"""


def main() -> None:
    graph = parse_graph_string(GRAPH)
    result = depth_first_search(graph, start=1)

    print("=" * 60)
    print("Edge classification (DFS from 1)")
    print("=" * 60)
    for edge in graph.edges():
        print(f"  {edge.origin} -> {edge.destination}: {result.classify(edge).name}")

    print()
    print("Vertex  discovery  finish  parent")
    for key in graph.vertices():
        parent = result.predecessor[key]
        print(f"  {key:<6}{result.discovery[key]:>9}{result.finish[key]:>8}  {parent}")

    print()
    print(f"Roots: {result.roots}")
    print(f"Back edges: {len(result.edges_of(EdgeClass.BACK))}")
    print(f"Graph has a cycle: {result.has_cycle()}")


if __name__ == "__main__":
    main()
