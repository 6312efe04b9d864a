"""I/O for the line-oriented graph text format."""

from .text import dump_graph_file, dump_graph_string, parse_graph_file, parse_graph_string

__all__ = [
    "parse_graph_string",
    "parse_graph_file",
    "dump_graph_string",
    "dump_graph_file",
]
