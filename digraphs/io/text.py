"""Line-oriented text format for directed graphs.

Format::

    <vertexCount> <edgeCount>
    <origin> <destination> [weight]
    ...

Vertex keys are integers. The weight token is optional (default 1) and is
read as an int when possible, otherwise as a float. Blank lines and lines
starting with ``#`` are ignored. The header counts are advisory: a mismatch
with the edges actually read is logged, or rejected in strict mode.

Any malformed line aborts the load with MalformedInputError; a partially
built graph is never returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from digraphs.errors import MalformedInputError
from digraphs.graphs import DiGraph
from digraphs.logging import get_logger

from .utils import format_weight, parse_int, parse_weight

logger = get_logger(__name__)

PathLike = Union[str, Path]


def parse_graph_string(text: str, strict: bool = False) -> DiGraph:
    """
    Parse a graph description into a DiGraph.

    Parameters
    ----------
    text : str
        Graph description in the text format.
    strict : bool
        If True, a header that disagrees with the number of edges read, or
        declares fewer vertices than the edges reference, is an error.

    Returns
    -------
    DiGraph
        Graph holding every edge in file order; edge ids follow line order.

    Raises
    ------
    MalformedInputError
        If the header or any edge line cannot be parsed.
    """
    lines = _significant_lines(text)
    if not lines:
        raise MalformedInputError("Missing '<vertexCount> <edgeCount>' header.")

    header_no, header = lines[0]
    vertex_count, edge_count = _parse_header(header_no, header)
    graph = DiGraph(vertex_count, edge_count)

    for line_no, line in lines[1:]:
        origin, destination, weight = _parse_edge_line(line_no, line)
        graph.add_edge(origin, destination, weight)

    _check_counts(graph, strict)
    logger.debug(
        "Parsed graph with %d vertices and %d edges",
        graph.vertex_count(),
        graph.edge_count(),
    )
    return graph


def parse_graph_file(path: PathLike, strict: bool = False) -> DiGraph:
    """
    Parse a graph description file into a DiGraph.

    Parameters
    ----------
    path : str or Path
        Path to the file.
    strict : bool
        See parse_graph_string.

    Returns
    -------
    DiGraph
        Parsed graph.

    Raises
    ------
    MalformedInputError
        If the content cannot be parsed.
    FileNotFoundError
        If the file does not exist.
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_graph_string(text, strict=strict)


def dump_graph_string(graph: DiGraph) -> str:
    """
    Serialize a graph to the text format.

    The header carries the actual vertex and edge counts. Edges are written
    in (origin, destination, id) order with explicit weights. Isolated
    vertices cannot be expressed by the format and only show up in the
    header count.

    Parameters
    ----------
    graph : DiGraph
        Graph to serialize.

    Returns
    -------
    str
        Text ending with a newline.
    """
    out = [f"{graph.vertex_count()} {graph.edge_count()}"]
    for edge in graph.edges():
        out.append(f"{edge.origin} {edge.destination} {format_weight(edge.weight)}")
    return "\n".join(out) + "\n"


def dump_graph_file(graph: DiGraph, path: PathLike) -> None:
    """Write a graph to a file in the text format."""
    Path(path).write_text(dump_graph_string(graph), encoding="utf-8")


def _significant_lines(text: str) -> List[Tuple[int, str]]:
    lines = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        lines.append((number, line))
    return lines


def _parse_header(line_no: int, line: str) -> Tuple[int, int]:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedInputError(
            f"Header must be '<vertexCount> <edgeCount>', got {line!r}", line_no, line
        )
    vertex_count = parse_int(tokens[0], line_no, line)
    edge_count = parse_int(tokens[1], line_no, line)
    if vertex_count < 0 or edge_count < 0:
        raise MalformedInputError(f"Header counts must be non-negative: {line!r}", line_no, line)
    return vertex_count, edge_count


def _parse_edge_line(line_no: int, line: str) -> Tuple[int, int, Union[int, float]]:
    tokens = line.split()
    if len(tokens) not in (2, 3):
        raise MalformedInputError(
            f"Edge line must be '<origin> <destination> [weight]', got {line!r}",
            line_no,
            line,
        )
    origin = parse_int(tokens[0], line_no, line)
    destination = parse_int(tokens[1], line_no, line)
    weight: Union[int, float] = 1
    if len(tokens) == 3:
        weight = parse_weight(tokens[2], line_no, line)
    return origin, destination, weight


def _check_counts(graph: DiGraph, strict: bool) -> None:
    problems: List[str] = []
    if graph.edge_count() != graph.declared_edge_count:
        problems.append(
            f"header declares {graph.declared_edge_count} edges, read {graph.edge_count()}"
        )
    if graph.vertex_count() > graph.declared_vertex_count:
        problems.append(
            f"header declares {graph.declared_vertex_count} vertices, "
            f"edges reference {graph.vertex_count()}"
        )
    if not problems:
        return

    message = "; ".join(problems)
    if strict:
        raise MalformedInputError(message)
    logger.warning("Graph header mismatch: %s", message)
